"""
Codec Configuration.

Configuration is passed per call; the codec keeps no module-level state
beyond the immutable ``DEFAULT_CONFIG``.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from rdf_starstring.errors import ConfigValidationError

logger = logging.getLogger(__name__)

# Quoted terms nested deeper than this are rejected
DEFAULT_MAX_NESTING_DEPTH = 64

# Highest accepted limit; each quoted level costs two stack frames while decoding
MAX_NESTING_DEPTH_CEILING = 256

ENV_MAX_NESTING_DEPTH = "RDF_STARSTRING_MAX_NESTING_DEPTH"


@dataclass(frozen=True)
class CodecConfig:
    """Settings for decoding term strings."""
    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH

    def to_dict(self) -> Dict[str, Any]:
        return {
            "max_nesting_depth": self.max_nesting_depth,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CodecConfig":
        return cls(
            max_nesting_depth=int(data.get("max_nesting_depth", DEFAULT_MAX_NESTING_DEPTH)),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CodecConfig":
        """
        Build a configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            Validated CodecConfig
        """
        if environ is None:
            raw = os.getenv(ENV_MAX_NESTING_DEPTH)
        else:
            raw = environ.get(ENV_MAX_NESTING_DEPTH)

        if raw is None or not raw.strip():
            return cls()

        try:
            depth = int(raw)
        except ValueError:
            raise ConfigValidationError(f"{ENV_MAX_NESTING_DEPTH} must be an integer, got {raw!r}")

        config = cls(max_nesting_depth=depth)
        config.validate_or_raise()
        logger.debug(f"Loaded codec config from environment: {config.to_dict()}")
        return config

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns list of error messages (empty if valid).
        """
        errors = []
        if self.max_nesting_depth < 1:
            errors.append("max_nesting_depth must be at least 1")
        if self.max_nesting_depth > MAX_NESTING_DEPTH_CEILING:
            errors.append(f"max_nesting_depth cannot exceed {MAX_NESTING_DEPTH_CEILING}")
        return errors

    def validate_or_raise(self) -> None:
        """Validate configuration, raising on errors."""
        errors = self.validate()
        if errors:
            raise ConfigValidationError("; ".join(errors))


DEFAULT_CONFIG = CodecConfig()
