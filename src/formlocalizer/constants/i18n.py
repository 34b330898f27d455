"""
Constants describing language packs: file layout, wire-format keys, and fallback values.
"""
from typing import Final, List, Tuple


class PackKeys:
    """JSON field names used by language pack files."""
    AUTHOR_NAME: Final[str] = "AuthorName"
    AUTHOR_PROFILE: Final[str] = "AuthorProfile"
    AUTHOR_EMAIL: Final[str] = "AuthorEmail"
    FONT_PRIMARY: Final[str] = "FontUIWindows"
    FONT_SECONDARY: Final[str] = "FontUILinux"
    FORMS: Final[str] = "Forms"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        names = [self.AUTHOR_NAME, self.AUTHOR_PROFILE, self.AUTHOR_EMAIL,
                 self.FONT_PRIMARY, self.FONT_SECONDARY, self.FORMS]
        if len(set(names)) != len(names):
            raise ValueError("Language pack field names must be unique")


class I18nConstants:
    """Defines pack discovery, fallback and serialization constants."""
    I18N_DIRNAME: Final[str] = "i18n"
    PACK_EXTENSION: Final[str] = ".json"
    PACK_ENCODING: Final[str] = "utf-8"
    # Packs authored on Windows often start with a BOM.
    PACK_READ_ENCODING: Final[str] = "utf-8-sig"
    JSON_INDENT: Final[int] = 2

    DEFAULT_LANGUAGE: Final[str] = "en-US"
    UNKNOWN_LANGUAGE_TEMPLATE: Final[str] = "Unknown Language ({language_id})"

    AUTHOR_NOT_FOUND: Final[Tuple[str, str, str]] = (
        "// Language File is Not Found",
        "// Error 19",
        "// Please check Json file exist at i18n folder",
    )
    AUTHOR_BROKEN: Final[Tuple[str, str, str]] = (
        "// Json object is broken",
        "// Error 20",
        "// Please check that Json file formatting is valid",
    )

    def __init__(self) -> None:
        self.keys = PackKeys()
        self.validate()

    def validate(self) -> None:
        if not self.PACK_EXTENSION.startswith("."):
            raise ValueError("PACK_EXTENSION must start with a dot")
        if not self.DEFAULT_LANGUAGE:
            raise ValueError("DEFAULT_LANGUAGE must not be empty")
        if "{language_id}" not in self.UNKNOWN_LANGUAGE_TEMPLATE:
            raise ValueError("UNKNOWN_LANGUAGE_TEMPLATE must contain a {language_id} placeholder")
        for placeholder in (self.AUTHOR_NOT_FOUND, self.AUTHOR_BROKEN):
            if len(placeholder) != 3:
                raise ValueError("Author placeholders must have exactly three fields")

    def pack_filename(self, language_id: str) -> str:
        """Returns the file name of the pack for `language_id`."""
        return f"{language_id}{self.PACK_EXTENSION}"

    def author_placeholder(self, broken: bool) -> List[str]:
        return list(self.AUTHOR_BROKEN if broken else self.AUTHOR_NOT_FOUND)

# Singleton instance for easy access
i18n = I18nConstants()
