import pytest
import exactmatrix as em


@pytest.fixture
def invertible_3x3():
    """Invertible matrix with determinant 15."""
    return em.matrix([[1, -4, 2], [-2, 8, -9], [-1, 7, 0]])


@pytest.fixture
def system_3x4():
    """Augmented matrix of a linear system with the unique solution (-8, 1, -2)."""
    return em.matrix([[1, 2, -1, -4], [2, 3, -1, -11], [-2, 0, -3, 22]])


@pytest.fixture
def tall_3x2():
    """Two independent column vectors in three dimensions."""
    return em.matrix([[1, 0], [0, 1], [1, 1]])


@pytest.fixture
def singular_2x2():
    """Rank-1 square matrix."""
    return em.matrix([[1, 2], [2, 4]])


@pytest.fixture(params=[
    [[1, -4, 2], [-2, 8, -9], [-1, 7, 0]],
    [[1, 2, -1, -4], [2, 3, -1, -11], [-2, 0, -3, 22]],
    [[1, 0], [0, 1], [1, 1]],
    [[1, 2], [2, 4]],
    [[0, 0, 1], [0, 0, 2]],
    [[0, 3, -6, 6, 4, -5], [3, -7, 8, -5, 8, 9], [3, -9, 12, -9, 6, 15]],
    [['1/2', '1/3'], ['0.25', 0.2], [7, -1]],
    [[0]],
],
                ids=['invertible', 'system', 'tall', 'singular', 'free_leading', 'textbook', 'fractions', 'zero'])
def any_matrix(request):
    """Provide matrices of various shapes and ranks."""
    return em.matrix(request.param)
