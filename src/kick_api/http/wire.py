"""Fronteira wire <-> domínio.

Na rede os campos são snake_case; no domínio, camelCase. Cada chamada
fornece um WireContract (schema pydantic) que valida o corpo e a
conversão de nomes é profunda (dicts dentro de listas dentro de dicts).
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter
from pydantic.alias_generators import to_camel, to_snake

T = TypeVar("T")


def _convert_keys(data: Any, convert: Any) -> Any:
    if isinstance(data, dict):
        return {
            convert(key) if isinstance(key, str) else key: _convert_keys(value, convert)
            for key, value in data.items()
        }
    if isinstance(data, (list, tuple)):
        return [_convert_keys(item, convert) for item in data]
    return data


def camelize(data: Any) -> Any:
    """Converte chaves snake_case para camelCase (profundo)."""
    return _convert_keys(data, to_camel)


def decamelize(data: Any) -> Any:
    """Converte chaves camelCase para snake_case (profundo)."""
    return _convert_keys(data, to_snake)


class WireContract(Generic[T]):
    """Contrato de um corpo na fronteira wire.

    O schema descreve o formato *wire* (snake_case): um modelo pydantic,
    ``list[Modelo]`` ou qualquer tipo aceito por ``TypeAdapter``.

    Uso:
        contract = WireContract(list[Channel])
        channels = contract.to_domain(response_json["data"])
    """

    def __init__(self, schema: Any) -> None:
        self._adapter: TypeAdapter[T] = TypeAdapter(schema)

    def validate(self, data: Any) -> T:
        """Valida dados no formato wire.

        Raises:
            pydantic.ValidationError: Se os dados não satisfazem o schema.
        """
        return self._adapter.validate_python(data)

    def to_domain(self, data: Any) -> Any:
        """Valida dados wire e devolve a versão de domínio (camelCase).

        Datas declaradas como ``datetime`` no schema saem já parseadas.
        """
        value = self.validate(data)
        return camelize(self._adapter.dump_python(value, mode="python"))

    def to_wire(self, data: Any) -> Any:
        """Converte um corpo de domínio (camelCase) para o formato wire.

        Campos ausentes ou ``None`` não são enviados.
        """
        value = self.validate(decamelize(data))
        return self._adapter.dump_python(value, mode="json", exclude_none=True)
