"""
Configuração do pathfinder lida do ambiente (.env carregado em graph_pathfinder/__init__.py).

Variáveis:
- PATHFINDER_LOG_LEVEL: nível do logging (DEBUG, INFO, WARNING...). Padrão: WARNING.
- PATHFINDER_UNREACHED_COST: custo sentinela de nó "não alcançado". Padrão: 2000000; mínimo: 100000.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

ENV_LOG_LEVEL = "PATHFINDER_LOG_LEVEL"
ENV_UNREACHED_COST = "PATHFINDER_UNREACHED_COST"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_UNREACHED_COST = 2_000_000
# Piso do sentinela: abaixo disso custos reais de caminho o alcançam e a relaxação para
MIN_UNREACHED_COST = 100_000

# Sentinelas de predecessor e de posição no heap
NO_PARENT = -1
NO_HEAP_SLOT = -1

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def read_unreached_cost() -> int:
    """
    Custo sentinela para nós não alcançados.
    Deve ser inteiro >= MIN_UNREACHED_COST e bem maior que qualquer custo real de caminho.
    """
    raw = os.environ.get(ENV_UNREACHED_COST)
    if raw is None or not raw.strip():
        return DEFAULT_UNREACHED_COST
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{ENV_UNREACHED_COST} deve ser inteiro, recebido: {raw!r}") from None
    if value < MIN_UNREACHED_COST:
        raise ValueError(f"{ENV_UNREACHED_COST} deve ser >= {MIN_UNREACHED_COST}, recebido: {value}")
    return value


def read_log_level() -> str:
    raw = (os.environ.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(raw), int):
        raise ValueError(f"{ENV_LOG_LEVEL} inválido: {raw!r}")
    return raw


UNREACHED_COST: int = read_unreached_cost()


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """Configura o logging raiz (usado pelos scripts). Sem level, usa PATHFINDER_LOG_LEVEL."""
    if level is None:
        level = read_log_level()
    logging.basicConfig(level=level, format=LOG_FORMAT)
