from pydantic import BaseModel


class LanguageProfile(BaseModel):
    name: str
    keywords: list[str]
    indent: str
    tab_size: int
    comment_pattern: str
    requirements: list[str] = []

    @property
    def insert_spaces(self) -> bool:
        return self.indent != "\t"


class EditorSettings(BaseModel):
    language: str
    tab_size: int
    insert_spaces: bool
