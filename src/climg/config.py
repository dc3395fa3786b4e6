"""
climg Configuration - Rendering options and YAML loading.

The defaults reproduce the plain command line behaviour: a 100x200 fallback
terminal, two rows reserved for the shell prompt, and an Otsu threshold
computed per image. A YAML file can override any of them.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

from .terminal import TerminalGeometry


class RenderConfig(BaseModel):
    """
    Configuration model for a single render.

    Attributes:
        fallback_columns (int): Terminal width used when the size query fails
        fallback_rows (int): Terminal height used when the size query fails
        reserved_rows (int): Rows kept free below the image for the prompt
        min_rows (int): Smallest terminal height accepted before clamping
        invert (bool): Light pixels become dots instead of dark ones
        threshold (int | None): Fixed binarization threshold, or None for Otsu
    """

    fallback_columns: int = Field(default=100, ge=1, description="Columns assumed when the terminal cannot be queried.")
    fallback_rows: int = Field(default=200, ge=1, description="Rows assumed when the terminal cannot be queried.")
    reserved_rows: int = Field(default=2, ge=0, description="Rows reserved for the prompt and status lines.")
    min_rows: int = Field(default=3, ge=1, description="Terminal heights below this are clamped up to it.")
    invert: bool = Field(default=False, description="Render samples below the threshold as dots.")
    threshold: int | None = Field(default=None, ge=0, le=255, description="Fixed threshold; None selects Otsu's method.")

    @model_validator(mode="after")
    def _check_rows(self) -> RenderConfig:
        if self.min_rows <= self.reserved_rows:
            raise ValueError(
                f"min_rows ({self.min_rows}) must be greater than reserved_rows ({self.reserved_rows})"
            )
        return self

    @property
    def fallback_geometry(self) -> TerminalGeometry:
        """Geometry substituted when the terminal size query fails."""
        return TerminalGeometry(columns=self.fallback_columns, rows=self.fallback_rows)

    @classmethod
    def from_yaml(
        cls,
        path: str | Path,
        key_to_config: tuple[str, ...] = ("climg",),
    ) -> RenderConfig:
        """
        Load a RenderConfig from a YAML file.

        Parameters:
            path (str | Path): Path to the YAML configuration file.
            key_to_config (tuple[str, ...], optional): Keys leading to the
                climg section in nested files. Defaults to ("climg",).

        Returns:
            RenderConfig: The validated configuration.

        Raises:
            OSError: If the file cannot be read
            KeyError: If the navigation keys don't exist in the YAML structure
            pydantic.ValidationError: If a value is out of range or mistyped

        Example:
            >>> # climg:
            >>> #   fallback_columns: 80
            >>> #   invert: true
            >>> config = RenderConfig.from_yaml("climg.yaml")
        """
        path = Path(path)

        for encoding in ["utf-8", "utf-8-sig"]:
            try:
                data = yaml.safe_load(path.read_text(encoding=encoding))
                break
            except UnicodeDecodeError:
                if encoding == "utf-8-sig":
                    raise

        config = data
        for key in key_to_config:
            config = config[key]

        return cls.model_validate(config or {})
