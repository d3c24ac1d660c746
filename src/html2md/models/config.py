"""Pydantic configuration model for html2md."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ..errors import ConfigurationError

DEFAULT_SKIP_TAGS = ["script", "style", "head", "noscript", "template"]


def _import_yaml():
    try:
        import yaml
    except ImportError as err:
        raise ConfigurationError("YAML support requires PyYAML: pip install html2md[yaml]") from err
    return yaml


class ConverterConfig(BaseModel):
    """
    Configuration for the HTML to Markdown converter.

    Example:
        config = ConverterConfig(parser="lxml", max_depth=200)
        converter = Converter(config=config)

    YAML format:
        parser: html.parser
        skip_tags: [script, style, nav]
        max_depth: 200
        log_level: INFO
    """

    parser: Literal["html.parser", "lxml", "html5lib"] = Field(
        "html.parser",
        description="BeautifulSoup tree builder used when parsing raw markup",
    )
    skip_tags: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SKIP_TAGS),
        description="Tags whose whole subtree is dropped from the output",
    )
    max_depth: Optional[int] = Field(
        None,
        ge=1,
        description="Maximum nesting depth to walk (None = bounded only by the input tree)",
    )
    debug: bool = Field(False, description="Log every rule dispatch at DEBUG level")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "WARNING",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(None, description="Log file path")

    model_config = {"extra": "forbid"}

    @field_validator("skip_tags")
    @classmethod
    def _lowercase_tags(cls, value: list[str]) -> list[str]:
        return [tag.strip().lower() for tag in value if tag.strip()]

    def to_yaml(self) -> str:
        """Serialize config to YAML string."""
        yaml = _import_yaml()

        return yaml.dump(self.model_dump(mode="json", exclude_none=True), default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConverterConfig":
        """
        Load config from YAML string.

        Raises:
            ConfigurationError: If PyYAML is missing or the text is not valid YAML
            ValidationError: If the values do not fit the model
        """
        yaml = _import_yaml()
        try:
            data = yaml.safe_load(yaml_str) or {}
        except yaml.YAMLError as err:
            raise ConfigurationError(f"Invalid YAML configuration: {err}") from err
        return cls.model_validate(data)

    @classmethod
    def from_yaml_file(cls, path: Path) -> "ConverterConfig":
        """Load config from YAML file."""
        return cls.from_yaml(Path(path).read_text(encoding="utf-8"))
