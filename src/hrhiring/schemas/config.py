"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError


class DepartmentConfig(BaseModel):
    label: str | None = None


class DepartmentsConfig(BaseModel):
    it: DepartmentConfig = Field(default_factory=DepartmentConfig)
    accounting: DepartmentConfig = Field(default_factory=DepartmentConfig)


class AppConfig(BaseModel):
    departments: DepartmentsConfig = Field(default_factory=DepartmentsConfig)

    def to_settings(self) -> dict[str, Any]:
        departments = self.departments.model_dump(exclude_none=True)
        departments = {name: values for name, values in departments.items() if values}
        if not departments:
            return {}
        return {"departments": departments}


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
