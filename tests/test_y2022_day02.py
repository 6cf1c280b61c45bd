import pytest

from adventkit.y2022_day02 import Game, Hand, parse_games, part_one, part_two

EXAMPLE = "A Y\nB X\nC Z\n"


def test_part_one_example():
    assert part_one(EXAMPLE) == 15


def test_part_two_example():
    assert part_two(EXAMPLE) == 12


def test_paper_beats_rock():
    assert Game(Hand.ROCK, Hand.PAPER).score() == 8


@pytest.mark.parametrize("mine", list(Hand))
def test_win_scores_six_more_than_loss(mine):
    games = [Game(theirs, mine) for theirs in Hand]
    scores = sorted(game.score() for game in games)
    assert scores[-1] - scores[0] == 6
    assert scores[1] - scores[0] == 3


def test_parse_plain_codes():
    assert parse_games("B Z") == [Game(Hand.PAPER, Hand.SCISSORS)]


@pytest.mark.parametrize("theirs", "ABC")
def test_draw_outcome_copies_hand(theirs):
    (game,) = parse_games(f"{theirs} Y", by_outcome=True)
    assert game.mine == game.theirs


@pytest.mark.parametrize("theirs", "ABC")
def test_win_and_lose_outcomes(theirs):
    (win,) = parse_games(f"{theirs} Z", by_outcome=True)
    (lose,) = parse_games(f"{theirs} X", by_outcome=True)
    assert win.score() - (win.mine + 1) == 6
    assert lose.score() == lose.mine + 1


def test_parse_rejects_unknown_letter():
    with pytest.raises(ValueError):
        parse_games("A Q")


def test_parse_rejects_odd_columns():
    with pytest.raises(ValueError):
        parse_games("A Y B")