import numpy as np

from blockrender.objects import cube_mesh


def test_mesh_shapes_and_types():
    vertices, indices = cube_mesh()
    assert vertices.shape == (24, 6)
    assert vertices.dtype == np.float32
    assert indices.shape == (36,)
    assert indices.dtype == np.uint32


def test_indices_cover_all_vertices():
    vertices, indices = cube_mesh()
    assert set(indices.tolist()) == set(range(len(vertices)))


def test_first_face_indices():
    _, indices = cube_mesh()
    assert indices[:6].tolist() == [0, 1, 2, 2, 3, 0]


def test_normals_are_unit_and_positions_on_face():
    vertices, _ = cube_mesh()
    positions, normals = vertices[:, :3], vertices[:, 3:]
    assert np.allclose(np.linalg.norm(normals, axis=1), 1.0)
    assert np.allclose(np.sum(positions * normals, axis=1), 0.5)


def test_triangles_wind_outward():
    vertices, indices = cube_mesh()
    positions, normals = vertices[:, :3], vertices[:, 3:]
    for tri in indices.reshape(-1, 3):
        a, b, c = positions[tri]
        cross = np.cross(b - a, c - a)
        assert np.dot(cross, normals[tri[0]]) > 0


def test_positions_are_the_eight_cube_corners():
    vertices, _ = cube_mesh()
    coordinates = set(vertices[:, :3].flatten().tolist())
    assert coordinates == {-0.5, 0.5}
    corners = {tuple(row) for row in vertices[:, :3].tolist()}
    assert len(corners) == 8