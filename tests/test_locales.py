from compass_helpers.locales import LOCALES, language_name, translate


def test_translate_dotted_key():
    assert translate("en", "form.error.fileMissing") == "Please upload your score report first."
    assert translate("es", "results.analysisTitle") == "Tu análisis"


def test_translate_substitutes_params():
    assert translate("en", "results.analysisTitlePersonalized", name="Alex") == "Alex's Analysis"
    assert translate("en", "form.uploading", progress=40) == "Uploading... 40%"


def test_translate_falls_back_to_english_then_key():
    # French has no scoreGenerator table
    assert translate("fr", "scoreGenerator.title") == "Sample Score Generator"
    assert translate("xx", "hero.title") == LOCALES["en"]["hero"]["title"]
    assert translate("en", "does.not.exist") == "does.not.exist"
    # a section is not a string
    assert translate("en", "form") == "form"


def test_language_name():
    assert language_name("en") == "English"
    assert language_name("es") == "Spanish"
    assert language_name("unknown") == "English"


def test_page_strings_exist_in_english():
    keys = [
        "scoreGenerator.intro",
        "scoreGenerator.tip",
        "careerExplorer.explore",
        "careerExplorer.progression",
        "savedAnalyses.delete",
        "chat.thinking",
    ]
    for key in keys:
        assert translate("en", key) != key
    assert translate("en", "careerExplorer.researching", degree="Law") == "Researching careers for Law..."
    assert translate("es", "savedAnalyses.deleted", name="Alex") == "Deleted Alex."
