"""Tests for coordinates and cell states."""

from conway.core.cell import CellState, Coordinate, NEIGHBOR_OFFSETS


class TestCoordinate:
    """Test cases for Coordinate."""

    def test_addition(self):
        """Coordinates add componentwise."""
        total = Coordinate(-5, 3) + Coordinate(2, 9)
        assert total.x == -3
        assert total.y == 12

    def test_equality_and_hash(self):
        """Coordinates compare and hash by value."""
        assert Coordinate(1, 2) == Coordinate(1, 2)
        assert Coordinate(1, 2) != Coordinate(2, 1)

        lookup = {Coordinate(1, 2): "a"}
        assert lookup[Coordinate(1, 2)] == "a"

    def test_unpacking(self):
        """Coordinates unpack as (x, y)."""
        x, y = Coordinate(4, 7)
        assert (x, y) == (4, 7)

    def test_neighbors(self):
        """A coordinate has the 8 surrounding cells as neighbors."""
        neighbors = set(Coordinate(0, 0).neighbors())
        assert len(neighbors) == 8
        assert Coordinate(0, 0) not in neighbors
        assert Coordinate(-1, -1) in neighbors
        assert Coordinate(1, 1) in neighbors


class TestNeighborOffsets:
    """Test the Moore neighbourhood offsets."""

    def test_offsets(self):
        """Eight distinct offsets, none of them the origin."""
        assert len(NEIGHBOR_OFFSETS) == 8
        assert len(set(NEIGHBOR_OFFSETS)) == 8
        assert Coordinate(0, 0) not in NEIGHBOR_OFFSETS
        for dx, dy in NEIGHBOR_OFFSETS:
            assert dx in (-1, 0, 1)
            assert dy in (-1, 0, 1)


class TestCellState:
    """Test cases for CellState."""

    def test_members(self):
        """Exactly two states exist."""
        assert {state.name for state in CellState} == {"ALIVE", "DEAD"}

    def test_glyphs(self):
        """Alive renders as 'x' and dead as a space."""
        assert CellState.ALIVE.glyph == "x"
        assert CellState.DEAD.glyph == " "
        assert str(CellState.ALIVE) == "x"
        assert str(CellState.DEAD) == " "
