"""Static 3-D solenoid with field lines; rotate and zoom with the mouse."""
from __future__ import annotations

import matplotlib.pyplot as plt

from physviz.core.config import SOLENOID_3D_CFG, Solenoid3DCfg
from physviz.render.scene3d import build_solenoid_scene


def run(cfg: Solenoid3DCfg = SOLENOID_3D_CFG) -> None:
    build_solenoid_scene(cfg)
    plt.show()
