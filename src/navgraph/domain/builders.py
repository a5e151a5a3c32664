from navgraph.domain.entities.geometry import Vec3
from navgraph.domain.entities.vertex import Vertex
from navgraph.domain.graph import Graph


def grid_index(x: int, y: int, width: int) -> int:
    return y * width + x


def grid_graph(
    width: int, height: int, *, spacing: float = 1.0, diagonal: bool = False, z: float = 0.0
) -> Graph:
    """Row-major ``width`` x ``height`` grid in the z plane, every cell linked both ways."""
    g = Graph(
        Vertex(Vec3(x * spacing, y * spacing, z)) for y in range(height) for x in range(width)
    )
    for y in range(height):
        for x in range(width):
            i = grid_index(x, y, width)
            if x + 1 < width:
                g.link_bidirect(i, grid_index(x + 1, y, width))
            if y + 1 < height:
                g.link_bidirect(i, grid_index(x, y + 1, width))
                if diagonal and x + 1 < width:
                    g.link_bidirect(i, grid_index(x + 1, y + 1, width))
                if diagonal and x > 0:
                    g.link_bidirect(i, grid_index(x - 1, y + 1, width))
    return g
