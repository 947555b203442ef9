import pytest

from conftest import FakeClient
from spotmenu.core.models import PlayerState
from spotmenu.core.player import Player, RepeatState


class TestRepeatState:
    def test_cycle(self):
        assert RepeatState.OFF.next() is RepeatState.CONTEXT
        assert RepeatState.CONTEXT.next() is RepeatState.TRACK
        assert RepeatState.TRACK.next() is RepeatState.OFF

    def test_parse(self):
        assert RepeatState.parse("context") is RepeatState.CONTEXT
        assert RepeatState.parse("bogus") is None


class TestPlayer:
    def setup_method(self):
        self.client = FakeClient()
        self.player = Player(self.client, "dev1")

    def test_play_pause_pauses_when_playing(self):
        self.client.state = PlayerState(is_playing=True)
        self.player.play_pause()
        assert self.client.calls[-1] == ("pause", "dev1")

    def test_play_pause_resumes_when_paused(self):
        self.client.state = PlayerState(is_playing=False)
        self.player.play_pause()
        assert self.client.calls[-1] == ("play", "dev1")

    def test_play_pause_resumes_without_state(self):
        self.client.state = None
        self.player.play_pause()
        assert self.client.calls[-1] == ("play", "dev1")

    def test_toggle_repeat_sequence(self):
        self.client.state = PlayerState(repeat_state="off")
        seen = []
        for _ in range(3):
            self.player.toggle_repeat()
            target = self.client.calls[-1][2]
            seen.append(target)
            self.client.state = PlayerState(repeat_state=target)

        assert seen == ["context", "track", "off"]

    def test_toggle_repeat_unknown_state_turns_off(self):
        self.client.state = PlayerState(repeat_state="weird")
        self.player.toggle_repeat()
        assert self.client.calls[-1] == ("set_repeat_mode", "dev1", "off")

    @pytest.mark.parametrize("method", ["toggle_repeat", "toggle_shuffle"])
    def test_toggles_without_state_do_nothing(self, method):
        self.client.state = None
        getattr(self.player, method)()
        assert self.client.calls == [("get_player",)]

    def test_toggle_shuffle(self):
        self.client.state = PlayerState(shuffle_state=True)
        self.player.toggle_shuffle()
        assert self.client.calls[-1] == ("set_shuffle_state", "dev1", False)

    def test_set_device_applies_to_later_calls(self):
        self.player.set_device("dev2")
        self.player.next()
        self.player.play_context("spotify:album:a1", "spotify:track:t1")

        assert self.client.calls == [
            ("next", "dev2"),
            ("play_context", "spotify:album:a1", "dev2", "spotify:track:t1"),
        ]
