import logging
import time
from models.code import GeneratedCode
from services.code_cleaner import CodeCleaner
from services.languages import detect_language, format_prompt

logger = logging.getLogger("agent.code_generation")


class CodeGenerationAgent:
    """Turns a natural-language prompt into cleaned-up code in a detected language."""

    def __init__(self, llm_service):
        self.name = "code_generation"
        self.llm = llm_service

    async def run(self, prompt: str) -> GeneratedCode:
        start = time.time()

        language = detect_language(prompt)
        formatted = format_prompt(prompt, language)
        logger.info(f"[{self.name}] Generating {language} code ({len(prompt)} char prompt)")

        raw = await self.llm.generate(formatted)
        code = CodeCleaner.clean(raw, language)

        logger.info(
            f"[{self.name}] Done in {time.time() - start:.2f}s "
            f"({len(raw)} chars raw, {len(code)} chars cleaned)"
        )
        return GeneratedCode(code=code, language=language)
