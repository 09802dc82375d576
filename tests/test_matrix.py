import pytest

from dsbasics.matrix import Matrix


def _identity_like():
    m = Matrix(3, 4)
    m[0, 0] = 1
    m[1, 1] = 1
    m[2, 2] = 1
    return m


def test_shape():
    m = Matrix(3, 4)
    assert (m.rows, m.cols) == (3, 4)


def test_fill_value_everywhere():
    m = Matrix(2, 3, fill=7)
    assert all(m[r, c] == 7 for r in range(2) for c in range(3))


def test_set_and_get_round_trip():
    m = Matrix(3, 4)
    for r in range(3):
        for c in range(4):
            m[r, c] = (r, c)
    assert all(m[r, c] == (r, c) for r in range(3) for c in range(4))


def test_str_demo_layout():
    assert str(_identity_like()) == "1 0 0 0 \n0 1 0 0 \n0 0 1 0 \n"


def test_str_has_one_line_per_row():
    m = Matrix(5, 2, fill=3)
    lines = str(m).splitlines()
    assert len(lines) == 5
    assert all(line.split() == ["3", "3"] for line in lines)


@pytest.mark.parametrize("key", [(3, 0), (0, 4), (-1, 0), (0, -1)])
def test_out_of_bounds_read(key):
    with pytest.raises(IndexError):
        _ = Matrix(3, 4)[key]


def test_out_of_bounds_write():
    m = Matrix(3, 4)
    with pytest.raises(IndexError):
        m[3, 4] = 1
    assert m == Matrix(3, 4)
    assert str(m) == "0 0 0 0 \n0 0 0 0 \n0 0 0 0 \n"


def test_bad_key_type():
    with pytest.raises(TypeError):
        _ = Matrix(2, 2)[1]


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Matrix(-1, 2)


def test_copy_is_deep_for_storage():
    m = _identity_like()
    dup = m.copy()
    assert dup == m
    m[0, 1] = 5
    assert dup[0, 1] == 0
    assert dup != m


def test_equality_considers_shape():
    assert Matrix(2, 3) != Matrix(3, 2)
    assert Matrix(2, 3) == Matrix(2, 3)