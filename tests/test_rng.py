"""Tests for the piece factory and randomizer."""

from tetris_piece import KINDS, Piece
from tetris_rng import KindRandomizer, PieceFactory


def test_same_seed_same_sequence():
    a = KindRandomizer(1234)
    b = KindRandomizer(1234)
    assert [a.next_piece() for _ in range(50)] == [b.next_piece() for _ in range(50)]


def test_pieces_come_from_catalogue():
    rng = KindRandomizer(99)
    seen = {rng.next_piece() for _ in range(500)}
    assert seen == set(KINDS)


def test_first_piece_avoids_s_z_o():
    for seed in range(200):
        assert KindRandomizer(seed).next_piece() not in ("S", "Z", "O")


def test_first_piece_rule_can_be_disabled():
    firsts = {KindRandomizer(seed, avoid_szo_first=False).next_piece() for seed in range(200)}
    assert firsts & {"S", "Z", "O"}


def test_custom_kind_list():
    rng = KindRandomizer(3, kinds=["O"])
    assert [rng.next_piece() for _ in range(4)] == ["O"] * 4


def test_factory_spawns_pieces():
    factory = PieceFactory(KindRandomizer(5), tile_size=30, position=4, depth=-2)
    piece = factory()
    assert isinstance(piece, Piece)
    assert (piece.orientation, piece.position, piece.depth, piece.tile_size) == (0, 4, -2, 30)


def test_factory_accepts_any_source():
    class Fixed:
        def next_piece(self):
            return "T"

    factory = PieceFactory(Fixed(), tile_size=40)
    assert [factory().kind for _ in range(3)] == ["T", "T", "T"]
