import re
from services.languages import get_profile

FENCE_RE = re.compile(r"```[\w-]*\n?|\n?```")
PY_CLAUSE_RE = re.compile(r"^(else|elif|except|finally)\b")
PY_TERMINATOR_RE = re.compile(r"^(return|break|continue|pass|raise)\b")


class CodeCleaner:
    """Tidy raw model output into something that reads well in the editor."""

    @staticmethod
    def clean(code: str, language: str) -> str:
        """
        Strip markdown fences and comments, drop blank lines and re-indent.
        Running it twice gives the same result as running it once.
        """
        # Removing a fence or comment can splice its neighbours into a new one
        while True:
            stripped = CodeCleaner.strip_comments(CodeCleaner.strip_fences(code), language)
            if stripped == code:
                break
            code = stripped

        lines = [line.strip() for line in code.split("\n")]
        lines = [line for line in lines if line]
        lines = CodeCleaner.reindent(lines, language)

        return "\n".join(line.rstrip() for line in lines)

    @staticmethod
    def strip_fences(code: str) -> str:
        return FENCE_RE.sub("", code)

    @staticmethod
    def strip_comments(code: str, language: str) -> str:
        pattern = get_profile(language).comment_pattern
        return re.sub(pattern, "", code, flags=re.MULTILINE)

    @staticmethod
    def reindent(lines: list[str], language: str) -> list[str]:
        """Re-indent already-trimmed lines with the language's indent unit."""
        profile = get_profile(language)
        if profile.name == "python":
            return CodeCleaner._reindent_python(lines, profile.indent)
        return CodeCleaner._reindent_braces(lines, profile.indent)

    @staticmethod
    def _reindent_braces(lines: list[str], unit: str) -> list[str]:
        level = 0
        result = []
        for line in lines:
            if line.startswith("}"):
                level = max(0, level - 1)
            result.append(unit * level + line)
            if line.endswith("{"):
                level += 1
        return result

    @staticmethod
    def _reindent_python(lines: list[str], unit: str) -> list[str]:
        level = 0
        closed = False  # previous line already ended its block
        result = []
        for line in lines:
            if PY_CLAUSE_RE.match(line) and not closed:
                level = max(0, level - 1)
            result.append(unit * level + line)

            closed = False
            if line.endswith(":"):
                level += 1
            elif PY_TERMINATOR_RE.match(line):
                level = max(0, level - 1)
                closed = True
        return result
