import pytest

from simulator.errors import InvalidTape, OutOfBoundsHead
from simulator.tape import Tape


def test_copies_input():
    cells = list(">01#")
    tape = Tape(cells)
    tape.write('1')
    assert cells == list(">01#")
    assert tape.contents() == ">11#"


def test_move_within_bounds():
    tape = Tape(">01#", head=1)
    tape.move(1)
    assert tape.read() == '1'
    tape.move(0)
    assert tape.head == 2


def test_move_past_either_end_fails():
    tape = Tape(">#", head=1)
    with pytest.raises(OutOfBoundsHead):
        tape.move(1)

    tape = Tape(">#", head=0)
    with pytest.raises(OutOfBoundsHead) as exc:
        tape.move(-1)
    assert exc.value.head == -1
    assert exc.value.tape_size == 2


def test_read_with_head_outside_tape():
    with pytest.raises(OutOfBoundsHead):
        Tape(">", head=1).read()


def test_rejects_multi_character_cells():
    with pytest.raises(InvalidTape):
        Tape([">", "ab"])


def test_render_marks_head():
    assert Tape(">01#", head=2).render() == (">01#", "  ^ ")
