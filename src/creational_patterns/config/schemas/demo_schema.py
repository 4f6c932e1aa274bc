"""Configuration schemas for the pattern demonstrations."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from creational_patterns.config.defaults import OutputFormat


class PrototypeDemoConfig(BaseModel):
    """Prototype demonstration settings."""

    primitive: int = Field(245, description="Primitive value carried by the demo prototype")


class FactoryDemoConfig(BaseModel):
    """Abstract Factory / Factory Method demonstration settings."""

    default_variant: Optional[str] = Field(
        None, description="Variant run when none is given; every registered variant when unset"
    )


class OutputConfig(BaseModel):
    """Console output settings."""

    format: str = Field("text", description="Output format: text, json or yaml")

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        valid_formats = [output_format.value for output_format in OutputFormat]
        if v not in valid_formats:
            raise ValueError(f"Output format must be one of {valid_formats}")
        return v
