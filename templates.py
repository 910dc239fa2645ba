from pathlib import Path

TESTDATA_DIR = Path(__file__).resolve().parent / "testdata"
PET_CREATE_JSON_PATH = TESTDATA_DIR / "pet_create.json"


def load_template(path):
    with open(path, "r", encoding="utf-8") as file:
        return file.read()


def substitute(text, values):
    """
    Literal replace-all of every {{key}} token. No escaping and no logic:
    values are inserted with str(), so quoting lives in the template itself.
    """
    for key, value in values.items():
        text = text.replace("{{" + key + "}}", str(value))
    return text


def render_template(path, values):
    return substitute(load_template(path), values)
