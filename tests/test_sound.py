import pytest

from lizardmeme.randomizer import Randomizer
from lizardmeme.sound import ScoreSounds


class _FakeSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


def test_play_plays_the_returned_sound():
    sounds = [_FakeSound(), _FakeSound(), _FakeSound()]
    score = ScoreSounds(sounds, Randomizer(1))
    played = score.play()
    assert played in sounds
    assert played.plays == 1
    assert sum(s.plays for s in sounds) == 1


def test_every_sound_gets_played_eventually():
    sounds = [_FakeSound(), _FakeSound(), _FakeSound()]
    score = ScoreSounds(sounds, Randomizer(7))
    for _ in range(200):
        score.play()
    assert sum(s.plays for s in sounds) == 200
    assert all(s.plays > 0 for s in sounds)


def test_single_sound_always_chosen():
    only = _FakeSound()
    score = ScoreSounds([only], Randomizer(2))
    for _ in range(5):
        assert score.play() is only
    assert only.plays == 5


def test_empty_sounds_rejected():
    with pytest.raises(ValueError):
        ScoreSounds([], Randomizer(0))


def test_load_missing_files(tmp_path):
    with pytest.raises(FileNotFoundError):
        ScoreSounds.load(tmp_path, Randomizer(0))