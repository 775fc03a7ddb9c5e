import os

KEY_VALUE_SEPARATOR = " = "


def sanitize_entry(value):
    """
    Clean up a diacritic configuration value as found in translation files:
    drop every space, then one layer of surrounding double quotes.
    e.g. ' "ា ិ ី" ' -> 'ាិី'
    """
    if value is None:
        return ""
    value = value.replace(" ", "")
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        value = value[1:-1]
    return value


def read_translation_file(path):
    """
    Loads one language's translation file into a dict.

    Format is one 'key = value' per line. Blank lines and lines starting with '#'
    are ignored, as are lines without a ' = ' separator. Only the first separator
    splits, so values may contain ' = ' themselves.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Translation file not found at {path}")

    translations = {}
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.rstrip('\r\n')
            if not line.strip() or line.lstrip().startswith('#'):
                continue
            if KEY_VALUE_SEPARATOR not in line:
                continue

            key, value = line.split(KEY_VALUE_SEPARATOR, 1)
            # Escaped newlines are stored literally in the files
            translations[key] = value.replace('\\n', '\n')

    return translations
