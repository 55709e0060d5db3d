"""UI strings for the supported languages."""

DEFAULT_LOCALE = "en"

LOCALES = {
    "en": {
        "languageName": "English",
        "label": "🇬🇧 English",
        "hero": {
            "title": "Find Your Future University",
            "subtitle": "Upload your test scores and let AI match you with colleges, degree pathways and scholarships.",
        },
        "form": {
            "scoreTitle": "1. Your Scores",
            "uploadLabel": "Upload your score report (PNG, JPG or PDF)",
            "uploadStatus": "No file selected",
            "uploading": "Uploading... {progress}%",
            "uploaded": "Loaded {name}",
            "generateSample": "Need a sample? Open the Sample Score Generator page.",
            "pictureLabel": "Student picture (optional)",
            "preferencesTitle": "2. Your Preferences",
            "location": "Preferred location",
            "degree": "Degree program",
            "universitySize": "University size",
            "campusSetting": "Campus setting",
            "prioritizeRankings": "Prioritize top-ranked universities",
            "wantsScholarship": "I'm looking for scholarships",
            "scholarshipTypes": "Scholarship types",
            "allLabel": "All",
            "minGrant": "Minimum grant amount",
            "buttonText": "Find My Colleges",
            "error": {
                "fileMissing": "Please upload your score report first.",
            },
        },
        "results": {
            "analysisTitle": "Your Analysis",
            "analysisTitlePersonalized": "{name}'s Analysis",
            "summary": "Summary",
            "keyStrengths": "Key Strengths",
            "pathways": "Recommended Degree Pathways",
            "careerOptions": "Career options",
            "colleges": "Recommended Colleges",
            "reason": "Why it fits",
            "tuitionLocal": "Tuition (local)",
            "tuitionInternational": "Tuition (international)",
            "scholarships": "Scholarships",
            "eligibility": "Eligibility",
            "learnMore": "Learn more",
            "overview": "Overview",
            "programHighlights": "Program highlights",
            "diversity": "Diversity & culture",
            "studentExperience": "Student experience",
            "testimonials": "Testimonials",
            "averageGpa": "Average GPA",
            "acceptanceRate": "Acceptance rate",
            "startChat": "Chat with an AI counselor",
            "save": "Save this analysis",
            "saved": "Analysis saved.",
            "loading": {
                "comprehensiveAnalysis": "Running a comprehensive analysis of your scores...",
                "details": "Fetching college details...",
            },
        },
        "scoreGenerator": {
            "title": "Sample Score Generator",
            "intro": "No score report at hand? Generate a realistic sample, download it, and upload it on the College Finder page.",
            "grade": "Grade level",
            "generate": "Generate Sample Report",
            "generating": "Generating sample report...",
            "reportLabel": "Sample report",
            "download": "Download sample report",
            "tip": "Tip: the College Finder accepts PNG, JPG or PDF. Print the text to PDF or take a screenshot before uploading.",
        },
        "careerExplorer": {
            "title": "Career Explorer",
            "intro": "See where a degree can take you: job market outlook, salaries and top career paths.",
            "degree": "Degree or pathway",
            "degreeHelp": "Pathways from your analysis are listed first.",
            "typeDegree": "...or type any degree",
            "explore": "Explore Careers",
            "researching": "Researching careers for {degree}...",
            "loadFailed": "Could not load career data. Please try again.",
            "careerPaths": "Career Paths",
            "industries": "Industries",
            "averageSalary": "Average Salary",
            "notAvailable": "N/A",
            "marketOverview": "Job Market Overview",
            "growthRate": "Growth rate",
            "competition": "Competition",
            "topPaths": "Top Career Paths",
            "showDetails": "Day-to-day & skills",
            "loadingDetails": "Loading details...",
            "detailsFailed": "Could not load details.",
            "responsibilities": "Day-to-day responsibilities",
            "skills": "Required skills",
            "progression": "Career progression",
        },
        "savedAnalyses": {
            "title": "Saved Analyses",
            "intro": "Revisit earlier results and compare estimated tuition across recommended colleges.",
            "empty": "No saved analyses yet.",
            "emptyHint": "Run an analysis on the College Finder page and click 'Save this analysis'.",
            "unnamed": "Unnamed",
            "notAvailable": "N/A",
            "select": "Select an analysis:",
            "scoreReport": "Score Report",
            "colleges": "Colleges",
            "scholarships": "Scholarships",
            "summary": "Summary",
            "tuitionTitle": "Tuition Comparison",
            "noColleges": "This analysis has no colleges.",
            "unreadableTuition": "Tuition estimates could not be read as numbers; see the table below.",
            "chartTitle": "Estimated Yearly Tuition (currency as quoted)",
            "download": "Download Analysis as JSON",
            "delete": "Delete this analysis",
            "deleted": "Deleted {name}.",
        },
        "chat": {
            "title": "AI Counselor",
            "placeholder": "Ask about your colleges, scholarships or careers...",
            "missing": "Run an analysis on the main page first.",
            "discussing": "Discussing {count} recommended colleges: {names}",
            "clear": "Clear chat",
            "thinking": "Thinking...",
        },
        "error": {
            "aiService": "The AI service could not complete the request. Please try again.",
            "notInitialized": "Gemini is not initialized. Enter your API key in the sidebar.",
            "retry": "Retry",
        },
    },
    "es": {
        "languageName": "Spanish",
        "label": "🇪🇸 Español",
        "hero": {
            "title": "Encuentra tu futura universidad",
            "subtitle": "Sube tus calificaciones y deja que la IA te recomiende universidades, carreras y becas.",
        },
        "form": {
            "scoreTitle": "1. Tus calificaciones",
            "uploadLabel": "Sube tu informe de calificaciones (PNG, JPG o PDF)",
            "uploadStatus": "Ningún archivo seleccionado",
            "uploading": "Subiendo... {progress}%",
            "uploaded": "Cargado {name}",
            "generateSample": "¿Necesitas un ejemplo? Abre la página del generador de calificaciones.",
            "pictureLabel": "Foto del estudiante (opcional)",
            "preferencesTitle": "2. Tus preferencias",
            "location": "Ubicación preferida",
            "degree": "Programa de estudios",
            "universitySize": "Tamaño de la universidad",
            "campusSetting": "Entorno del campus",
            "prioritizeRankings": "Priorizar universidades mejor clasificadas",
            "wantsScholarship": "Busco becas",
            "scholarshipTypes": "Tipos de beca",
            "allLabel": "Todas",
            "minGrant": "Monto mínimo de la beca",
            "buttonText": "Buscar mis universidades",
            "error": {
                "fileMissing": "Primero sube tu informe de calificaciones.",
            },
        },
        "results": {
            "analysisTitle": "Tu análisis",
            "analysisTitlePersonalized": "Análisis de {name}",
            "summary": "Resumen",
            "keyStrengths": "Fortalezas clave",
            "pathways": "Carreras recomendadas",
            "careerOptions": "Opciones profesionales",
            "colleges": "Universidades recomendadas",
            "reason": "Por qué encaja",
            "tuitionLocal": "Matrícula (local)",
            "tuitionInternational": "Matrícula (internacional)",
            "scholarships": "Becas",
            "eligibility": "Requisitos",
            "learnMore": "Más información",
            "startChat": "Hablar con un orientador IA",
            "save": "Guardar este análisis",
            "saved": "Análisis guardado.",
            "loading": {
                "comprehensiveAnalysis": "Analizando tus calificaciones...",
                "details": "Obteniendo detalles de la universidad...",
            },
        },
        "chat": {
            "title": "Orientador IA",
            "placeholder": "Pregunta sobre universidades, becas o carreras...",
            "missing": "Primero realiza un análisis en la página principal.",
        },
        "error": {
            "aiService": "El servicio de IA no pudo completar la solicitud. Inténtalo de nuevo.",
            "notInitialized": "Gemini no está inicializado. Introduce tu clave API en la barra lateral.",
            "retry": "Reintentar",
        },
    },
    "fr": {
        "languageName": "French",
        "label": "🇫🇷 Français",
        "hero": {
            "title": "Trouvez votre future université",
            "subtitle": "Téléversez vos résultats et laissez l'IA vous proposer universités, filières et bourses.",
        },
        "form": {
            "scoreTitle": "1. Vos résultats",
            "uploadLabel": "Téléversez votre relevé de notes (PNG, JPG ou PDF)",
            "uploadStatus": "Aucun fichier sélectionné",
            "uploading": "Téléversement... {progress}%",
            "uploaded": "{name} chargé",
            "pictureLabel": "Photo de l'étudiant (facultatif)",
            "preferencesTitle": "2. Vos préférences",
            "location": "Lieu souhaité",
            "degree": "Programme d'études",
            "universitySize": "Taille de l'université",
            "campusSetting": "Cadre du campus",
            "prioritizeRankings": "Privilégier les universités les mieux classées",
            "wantsScholarship": "Je cherche des bourses",
            "scholarshipTypes": "Types de bourse",
            "allLabel": "Toutes",
            "minGrant": "Montant minimum",
            "buttonText": "Trouver mes universités",
            "error": {
                "fileMissing": "Veuillez d'abord téléverser votre relevé de notes.",
            },
        },
        "results": {
            "analysisTitle": "Votre analyse",
            "analysisTitlePersonalized": "Analyse de {name}",
            "summary": "Résumé",
            "keyStrengths": "Points forts",
            "pathways": "Filières recommandées",
            "colleges": "Universités recommandées",
            "scholarships": "Bourses",
            "learnMore": "En savoir plus",
            "startChat": "Discuter avec un conseiller IA",
            "loading": {
                "comprehensiveAnalysis": "Analyse complète de vos résultats en cours...",
            },
        },
        "error": {
            "aiService": "Le service d'IA n'a pas pu traiter la demande. Veuillez réessayer.",
            "retry": "Réessayer",
        },
    },
}


def _lookup(table: dict, key: str):
    node = table
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def translate(locale: str, key: str, **params) -> str:
    """Look up a dotted key, falling back to English and then the key itself."""
    text = _lookup(LOCALES.get(locale, {}), key)
    if text is None:
        text = _lookup(LOCALES[DEFAULT_LOCALE], key)
    if text is None:
        return key
    for name, value in params.items():
        text = text.replace("{" + name + "}", str(value))
    return text


def language_name(locale: str) -> str:
    return LOCALES.get(locale, LOCALES[DEFAULT_LOCALE])["languageName"]
