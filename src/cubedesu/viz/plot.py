from __future__ import annotations

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from cubedesu.core.facelet import FaceletCube
from cubedesu.core.geometric import GeometricCube
from cubedesu.core.moves import Face

FACE_COLORS: dict[Face, tuple[int, int, int]] = {
    Face.U: (255, 255, 255),
    Face.R: (183, 18, 52),
    Face.F: (0, 155, 72),
    Face.D: (255, 213, 0),
    Face.L: (255, 88, 0),
    Face.B: (0, 70, 173),
}

# (row, col) of each face's top-left cell in the unfolded net:
#  U
# LFRB
#  D
NET_LAYOUT: dict[Face, tuple[int, int]] = {
    Face.U: (0, 3),
    Face.L: (3, 0),
    Face.F: (3, 3),
    Face.R: (3, 6),
    Face.B: (3, 9),
    Face.D: (6, 3),
}


def face_rgb(face: Face) -> tuple[float, float, float]:
    r, g, b = FACE_COLORS[face]
    return (r / 255.0, g / 255.0, b / 255.0)


def plot_stickers(cube: GeometricCube, *, ax=None, title: str | None = None):
    """3D scatter of sticker positions coloured by sticker colour."""
    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(111, projection="3d")

    stickers = cube.stickers()
    xs = [p.x for p, _ in stickers]
    ys = [p.y for p, _ in stickers]
    zs = [p.z for p, _ in stickers]
    colors = [face_rgb(c) for _, c in stickers]

    ax.scatter(xs, ys, zs, c=colors, s=120, edgecolors="black", depthshade=False)

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_zlabel("z")
    ax.set_title(title or "cube stickers")
    ax.set_box_aspect((1, 1, 1))
    return ax


def plot_net(cube: FaceletCube, *, ax=None, title: str | None = None):
    """Unfolded net of a facelet cube, one square per facelet."""
    if ax is None:
        _, ax = plt.subplots(figsize=(6.5, 5))

    for face, (row0, col0) in NET_LAYOUT.items():
        for i, label in enumerate(cube.face(face)):
            row = row0 + i // 3
            col = col0 + i % 3
            ax.add_patch(
                Rectangle((col, -row - 1), 1, 1, facecolor=face_rgb(label), edgecolor="black", linewidth=1.5)
            )

    ax.set_xlim(0, 12)
    ax.set_ylim(-9, 0)
    ax.set_aspect("equal")
    ax.set_axis_off()
    ax.set_title(title or "cube net")
    return ax
