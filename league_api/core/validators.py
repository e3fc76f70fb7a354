"""Validação de valores de domínio"""
from typing import Optional, Tuple

# Chave em minúsculas -> forma canônica
PLAYER_POSITIONS = {
    "penyerang": "Penyerang",
    "gelandang": "Gelandang",
    "bertahan": "Bertahan",
    "penjaga gawang": "Penjaga Gawang",
}


def normalize_player_position(position: Optional[str]) -> Tuple[Optional[str], bool]:
    """
    Valida a posição do jogador sem diferenciar maiúsculas/minúsculas.

    Retorna (forma_canonica, True) se a posição for conhecida,
    ou (None, False) caso contrário.
    """
    if not position:
        return None, False
    canonical = PLAYER_POSITIONS.get(position.lower())
    return canonical, canonical is not None


def allowed_positions_message() -> str:
    return "Posição inválida. Use uma de: " + ", ".join(PLAYER_POSITIONS.values())
