# Language labels accepted by execute-snippet, mapped to Judge0 CE language ids.
# Lookups are exact and case-sensitive.
_LANGUAGE_IDS: dict[str, int] = {
    "Bash": 46,
    "C": 50,
    "C#": 51,
    "C++": 54,
    "Go": 95,
    "Java": 91,
    "JavaScript": 93,
    "Kotlin": 78,
    "PHP": 68,
    "Python": 92,
    "Ruby": 72,
    "Rust": 73,
    "Swift": 83,
    "TypeScript": 94,
}


def resolve_language_id(label: str) -> int | None:
    return _LANGUAGE_IDS.get(label)


def supported_languages() -> list[str]:
    return sorted(_LANGUAGE_IDS)


def language_table() -> list[tuple[str, int]]:
    return sorted(_LANGUAGE_IDS.items())
