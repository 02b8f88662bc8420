"""Code model produced by language identifiers and consumed by rule evaluation."""

from pathlib import Path

from pydantic import BaseModel, Field


class Location(BaseModel):
    """Source span of a code element."""

    start_line: int = Field(ge=1, description="Start line number (1-indexed)")
    start_column: int = Field(ge=0, description="Start column (0-indexed)")
    end_line: int = Field(ge=1, description="End line number (1-indexed)")
    end_column: int = Field(ge=0, description="End column (0-indexed)")

    def __str__(self) -> str:
        return f"{self.start_line}:{self.start_column}-{self.end_line}:{self.end_column}"


class CodeVariable(BaseModel):
    """A field, parameter or local variable."""

    name: str = Field(description="Variable name")
    type_name: str | None = Field(default=None, description="Declared type as written in source")
    location: Location = Field(description="Declarator span")


class CodeFunction(BaseModel):
    """A method or constructor."""

    name: str = Field(description="Function name")
    location: Location = Field(description="Declaration span")
    vars: list[CodeVariable] = Field(
        default_factory=list, description="Parameters followed by local variables"
    )


class CodeClass(BaseModel):
    """A top-level class (or interface) declaration."""

    name: str = Field(description="Class name")
    location: Location = Field(description="Declaration span")
    functions: list[CodeFunction] = Field(default_factory=list, description="Methods in source order")
    vars: list[CodeVariable] = Field(default_factory=list, description="Fields in source order")


class CodeFile(BaseModel):
    """Structure of one compilation unit."""

    path: Path | None = Field(default=None, description="Path to the source file, if known")
    language: str = Field(description="Language the file was parsed as")
    package: str | None = Field(default=None, description="Declared package name")
    imports: list[str] = Field(default_factory=list, description="Imported names in source order")
    classes: list[CodeClass] = Field(default_factory=list, description="Top-level classes in source order")

    @property
    def class_names(self) -> list[str]:
        """Names of the top-level classes."""
        return [cls.name for cls in self.classes]
