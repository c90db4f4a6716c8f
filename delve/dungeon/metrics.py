from __future__ import annotations

from typing import Dict


def init_metrics() -> Dict[str, int | float | bool]:
    return {
        'floor_cells': 0,
        'carve_depth': 0,
        'exit_reachable': False,
        'exit_cells_carved': 0,
        'floor_orphaned_by_exit': 0,
        'exit_bypass_cells': 0,
        'monsters_requested': 0,
        'monsters_placed': 0,
        'gold_requested': 0,
        'gold_placed': 0,
        'potions_requested': 0,
        'potions_placed': 0,
        'runtime_ms': 0.0,
    }
