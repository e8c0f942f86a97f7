"""
JSON Schema Contract Validators

Валидация dict/JSON payload гауссовых целых по формальным JSON Schema
контрактам. Использует библиотеку jsonschema (Draft 2020-12).

Схемы (gaussiant/core/contracts/schema/):
- gaussian_int.json       — {"re": int, "im": int}
- gaussian_int_batch.json — {"name": str, "values": [gaussian_int, ...]}

ТИП "integer":
    Draft 2020-12 считает целым любое число с нулевой дробной частью (1.0).
    Модель GaussianInt принимает только настоящие целые, поэтому контракты
    проверяются StrictIntegerValidator: "integer" означает int (не bool).
    Payload, прошедший контракт, всегда строится моделью без ошибок.
"""

import json
from pathlib import Path
from typing import Any, ClassVar, Dict, Iterable, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.validators import extend

from gaussiant.core.domain.gaussian_int import GaussianInt

# =============================================================================
# STRICT INTEGER DIALECT
# =============================================================================


def _is_strict_integer(checker: Any, instance: Any) -> bool:
    return isinstance(instance, int) and not isinstance(instance, bool)


StrictIntegerValidator = extend(
    Draft202012Validator,
    type_checker=Draft202012Validator.TYPE_CHECKER.redefine("integer", _is_strict_integer),
)


# =============================================================================
# SCHEMA LOADER
# =============================================================================

_PACKAGE_SCHEMA_DIR = Path(__file__).parent / "schema"


class SchemaLoader:
    """
    Загрузчик и кэш JSON Schema файлов.

    Args:
        schema_dir: Каталог со схемами *.json (по умолчанию схемы пакета)

    Raises:
        RuntimeError: Если каталог не существует
    """

    def __init__(self, schema_dir: Path | None = None):
        self.schema_dir = Path(schema_dir) if schema_dir is not None else _PACKAGE_SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    def schema_names(self) -> List[str]:
        """Имена доступных схем (без расширения), по алфавиту."""
        return sorted(path.stem for path in self.schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени, прошедшая meta-validation.

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        path = self.schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            StrictIntegerValidator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        self._cache[schema_name] = schema
        return schema


_DEFAULT_LOADER: SchemaLoader | None = None


def _default_loader() -> SchemaLoader:
    global _DEFAULT_LOADER
    if _DEFAULT_LOADER is None:
        _DEFAULT_LOADER = SchemaLoader()
    return _DEFAULT_LOADER


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Проверка payload против одной схемы и построение доменного значения.

    Подкласс задаёт schema_name и реализует build().
    """

    schema_name: ClassVar[str]

    def __init__(self, loader: SchemaLoader | None = None):
        self.schema = (loader or _default_loader()).load_schema(self.schema_name)
        self._validator = StrictIntegerValidator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение контракта
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self._validator.iter_errors(data)

    def build(self, data: Dict[str, Any]) -> Any:
        raise NotImplementedError

    def load(self, data: Dict[str, Any]) -> Any:
        """Валидация, затем build(); невалидный payload до модели не доходит."""
        self.validate(data)
        return self.build(data)


class GaussianIntValidator(ContractValidator):
    """Контракт одного значения: {"re": int, "im": int}."""

    schema_name = "gaussian_int"

    def build(self, data: Dict[str, Any]) -> GaussianInt:
        return GaussianInt(data["re"], data["im"])


class GaussianIntBatchValidator(ContractValidator):
    """Контракт именованного списка значений."""

    schema_name = "gaussian_int_batch"

    def build(self, data: Dict[str, Any]) -> List[GaussianInt]:
        return [GaussianInt(item["re"], item["im"]) for item in data["values"]]


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_gaussian_int_payload(data: Dict[str, Any]) -> GaussianInt:
    """
    Валидация payload и построение GaussianInt.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    return GaussianIntValidator().load(data)


def validate_gaussian_int_batch(data: Dict[str, Any]) -> List[GaussianInt]:
    """
    Валидация batch payload и построение списка GaussianInt.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    return GaussianIntBatchValidator().load(data)


def dump_gaussian_int_batch(values: Iterable[GaussianInt], name: str | None = None) -> Dict[str, Any]:
    """Сериализация значений в payload gaussian_int_batch."""
    payload: Dict[str, Any] = {"values": [value.model_dump() for value in values]}
    if name is not None:
        payload["name"] = name
    return payload
