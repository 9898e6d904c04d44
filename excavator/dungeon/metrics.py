from typing import Dict


def init_metrics() -> Dict[str, int | float | dict]:
    return {
        'rooms': 0,
        'rooms_empty': 0,
        'tiles_room': 0,
        'tiles_tunnel': 0,
        'tiles_scatter': 0,
        'tiles_total': 0,
        'tunnels': 0,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }
