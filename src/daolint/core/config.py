"""Global configuration for daolint.

This module provides centralized configuration management with support for
environment variables and sensible defaults.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

# Primitive and value types that carry no entity semantics. Return types and
# parameters of these types are exempt from entity-name validation.
TRIVIAL_TYPES: frozenset[str] = frozenset(
    {
        # primitives
        "boolean",
        "byte",
        "char",
        "short",
        "int",
        "long",
        "float",
        "double",
        # boxed forms
        "Boolean",
        "Byte",
        "Character",
        "Short",
        "Integer",
        "Long",
        "Float",
        "Double",
        # common value types
        "String",
        "BigDecimal",
        "BigInteger",
        "Number",
        "Calendar",
        "Date",
        "LocalDate",
        "LocalDateTime",
        "LocalTime",
        "Instant",
    }
)


class DaolintConfig(BaseSettings):
    """daolint configuration settings.

    Values can be overridden via environment variables with DAOLINT_ prefix.
    Example: DAOLINT_ENTITY_SUFFIX=Repository overrides entity_suffix.
    """

    # Naming convention
    entity_suffix: str = Field(
        default="DAO",
        min_length=1,
        description="Class name suffix stripped to derive the entity name",
    )

    # Type matching
    trivial_types: set[str] = Field(
        default_factory=lambda: set(TRIVIAL_TYPES),
        description="Primitive/value types exempt from entity validation",
    )
    transitive_supertypes: bool = Field(
        default=False,
        description="Follow registered supertypes beyond a single level",
    )

    # Source selection
    dao_only: bool = Field(
        default=True,
        description="Only classify top-level types whose name ends with the suffix",
    )
    source_glob: str = Field(
        default="*.java",
        description="Glob pattern for source files under the scan root",
    )

    model_config = {
        "env_prefix": "DAOLINT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_config() -> DaolintConfig:
    """Get cached configuration instance.

    Returns:
        DaolintConfig singleton instance.
    """
    return DaolintConfig()


def reload_config() -> DaolintConfig:
    """Reload configuration (clears cache).

    Returns:
        Fresh DaolintConfig instance.
    """
    get_config.cache_clear()
    return get_config()
