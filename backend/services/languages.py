import logging
from models.language import LanguageProfile, EditorSettings

logger = logging.getLogger("languages")

DEFAULT_LANGUAGE = "python"

_BRACE_COMMENTS = r"//.*$|/\*[\s\S]*?\*/"

# Order matters: detection returns the first profile with a matching keyword.
PROFILES: dict[str, LanguageProfile] = {
    "python": LanguageProfile(
        name="python",
        keywords=["python", "py", "def ", "class ", ".py"],
        indent="    ",
        tab_size=4,
        comment_pattern=r"#.*$",
        requirements=[
            "Use type hints",
            "Follow PEP 8 style guide",
            "Include error handling",
            "Support async operations",
        ],
    ),
    "typescript": LanguageProfile(
        name="typescript",
        keywords=["typescript", "ts", "function ", "interface ", "type ", ".ts"],
        indent="  ",
        tab_size=2,
        comment_pattern=_BRACE_COMMENTS,
        requirements=[
            "Use type annotations",
            "Follow TypeScript conventions",
            "Include error handling",
            "Support async operations",
        ],
    ),
    "java": LanguageProfile(
        name="java",
        keywords=["java", "public class", "public static", ".java"],
        indent="  ",
        tab_size=2,
        comment_pattern=_BRACE_COMMENTS,
        requirements=[
            "Use standard Java conventions",
            "Include error handling",
            "Support async operations",
        ],
    ),
    "cpp": LanguageProfile(
        name="cpp",
        keywords=["c++", "cpp", "vector<", "#include", ".cpp", ".hpp"],
        indent="  ",
        tab_size=2,
        comment_pattern=_BRACE_COMMENTS,
        requirements=[
            "Use standard C++ conventions",
            "Include error handling",
            "Support resource management",
        ],
    ),
    "rust": LanguageProfile(
        name="rust",
        keywords=["rust", "fn ", "struct ", "impl ", ".rs"],
        indent="    ",
        tab_size=4,
        comment_pattern=_BRACE_COMMENTS,
        requirements=[
            "Use standard Rust conventions",
            "Include error handling",
            "Support async operations",
        ],
    ),
    "go": LanguageProfile(
        name="go",
        keywords=["golang", "go", "func ", "package ", ".go"],
        indent="\t",
        tab_size=2,
        comment_pattern=r"//.*$",
        requirements=[
            "Use standard Go conventions",
            "Include error handling",
            "Support concurrent operations",
        ],
    ),
}


def get_profile(language: str) -> LanguageProfile:
    """Profile for a language tag, falling back to the default language."""
    return PROFILES.get(language, PROFILES[DEFAULT_LANGUAGE])


def detect_language(prompt: str) -> str:
    """Infer the target language from keywords in the prompt."""
    text = prompt.lower()
    for name, profile in PROFILES.items():
        if any(keyword in text for keyword in profile.keywords):
            logger.debug(f"Detected language '{name}'")
            return name
    return DEFAULT_LANGUAGE


def format_prompt(prompt: str, language: str) -> str:
    """Wrap the user's prompt with generation requirements for the language."""
    profile = get_profile(language)
    extra = "".join(f"- {line}\n" for line in profile.requirements)

    return f"""Write code for this task:
{prompt}

Requirements:
- Use {profile.name}
- Write clean, working code
{extra}- Handle errors appropriately
- Return only the implementation"""


def editor_settings() -> list[EditorSettings]:
    return [
        EditorSettings(
            language=p.name,
            tab_size=p.tab_size,
            insert_spaces=p.insert_spaces,
        )
        for p in PROFILES.values()
    ]
