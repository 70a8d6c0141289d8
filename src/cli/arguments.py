"""Parser de tokens compartido por los comandos.

Por qué no usamos opciones de Typer para los flags:
- Cualquier token no reconocido (incluido `--algo`) forma parte del prompt.
- Un flag reconocido en última posición, sin valor, también es texto del prompt.
- El parser nunca falla: la validación de obligatorios la hace el pipeline.
"""

from __future__ import annotations

from typing import Mapping, Sequence, TypeVar

from pydantic import BaseModel

ParamsT = TypeVar("ParamsT", bound=BaseModel)


def split_tokens(tokens: Sequence[str], flags: Mapping[str, str]) -> tuple[dict[str, str], str | None]:
    """Separa `tokens` en valores de flags (por nombre de campo) y prompt.

    Los no-flags se concatenan en orden con un espacio. Si un flag se repite,
    gana el último valor.
    """

    values: dict[str, str] = {}
    prompt_parts: list[str] = []

    i = 0
    while i < len(tokens):
        token = tokens[i]
        field = flags.get(token)
        if field is not None and i + 1 < len(tokens):
            values[field] = tokens[i + 1]
            i += 2
            continue
        prompt_parts.append(token)
        i += 1

    prompt = " ".join(prompt_parts) or None
    return values, prompt


def parse_invocation(
    tokens: Sequence[str],
    flags: Mapping[str, str],
    model: type[ParamsT],
) -> ParamsT:
    """Construye el modelo de parámetros (inmutable) a partir de los tokens crudos."""

    values, prompt = split_tokens(tokens, flags)
    return model(**values, prompt=prompt)
