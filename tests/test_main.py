import pygame  # type: ignore
import pytest

from gridsnake.config import UP, DOWN, LEFT, RIGHT, Config
from gridsnake.events import DirectionRequested, InputSource, Restart, TogglePause
from gridsnake.main import build_parser, config_from_args, handle_events, translate_event
from gridsnake.render import hud_buttons
from gridsnake.session import GameSession, Phase
from gridsnake.storage import MemoryScoreStore

from conftest import ScriptedSpawner

HEAD = (15, 15)


@pytest.fixture
def cfg():
    return Config(high_score_path=None)


@pytest.fixture
def buttons(cfg):
    return hud_buttons(cfg)


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def click(pos, touch=False, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button, touch=touch)


class TestTranslateEvent:
    @pytest.mark.parametrize(
        "k, direction",
        [
            (pygame.K_UP, UP), (pygame.K_w, UP),
            (pygame.K_DOWN, DOWN), (pygame.K_s, DOWN),
            (pygame.K_LEFT, LEFT), (pygame.K_a, LEFT),
            (pygame.K_RIGHT, RIGHT), (pygame.K_d, RIGHT),
        ],
    )
    def test_direction_keys(self, cfg, buttons, k, direction):
        assert translate_event(key(k), HEAD, cfg, buttons) == DirectionRequested(
            direction, InputSource.KEYBOARD
        )

    def test_space_and_p_toggle(self, cfg, buttons):
        assert translate_event(key(pygame.K_SPACE), HEAD, cfg, buttons) == TogglePause()
        assert translate_event(key(pygame.K_p), HEAD, cfg, buttons) == TogglePause()

    def test_r_restarts(self, cfg, buttons):
        assert translate_event(key(pygame.K_r), HEAD, cfg, buttons) == Restart()

    def test_other_keys_ignored(self, cfg, buttons):
        assert translate_event(key(pygame.K_z), HEAD, cfg, buttons) is None

    def test_click_on_board_steers(self, cfg, buttons):
        event = translate_event(click((310, 80)), HEAD, cfg, buttons)
        assert event == DirectionRequested(UP, InputSource.TOUCH)

    def test_click_on_buttons(self, cfg, buttons):
        assert translate_event(click(buttons["start"].center), HEAD, cfg, buttons) == TogglePause()
        assert translate_event(click(buttons["restart"].center), HEAD, cfg, buttons) == Restart()

    def test_click_on_empty_hud(self, cfg, buttons):
        assert translate_event(click((5, cfg.board_px + 5)), HEAD, cfg, buttons) is None

    def test_synthetic_touch_click_and_right_button_ignored(self, cfg, buttons):
        assert translate_event(click((500, 310), touch=True), HEAD, cfg, buttons) is None
        assert translate_event(click((500, 310), button=3), HEAD, cfg, buttons) is None

    def test_finger_uses_normalized_coords(self, cfg, buttons):
        w, h = cfg.window_size
        event = pygame.event.Event(pygame.FINGERDOWN, x=550 / w, y=310 / h)
        assert translate_event(event, HEAD, cfg, buttons) == DirectionRequested(
            RIGHT, InputSource.TOUCH
        )


class TestHandleEvents:
    @pytest.fixture
    def session(self, cfg):
        return GameSession(cfg, store=MemoryScoreStore(), spawner=ScriptedSpawner())

    def test_events_reach_session(self, monkeypatch, session, cfg, buttons):
        monkeypatch.setattr(pygame.event, "get", lambda: [key(pygame.K_SPACE), key(pygame.K_UP)])
        assert handle_events(session, cfg, buttons) is True
        assert session.phase is Phase.RUNNING
        assert session.snake.pending == UP

    def test_touch_after_game_over_aims_from_new_head(self, monkeypatch, session, cfg, buttons):
        session.start()
        session.snake.body = [(0, 5), (1, 5)]
        session.snake.heading = session.snake.pending = LEFT
        session.advance()
        assert session.phase is Phase.GAME_OVER

        # straight above the fresh center head, but to the right of the dead one at (0, 5)
        monkeypatch.setattr(pygame.event, "get", lambda: [click((310, 100))])
        assert handle_events(session, cfg, buttons) is True
        assert session.phase is Phase.RUNNING
        assert session.snake.head == (15, 15)
        assert session.snake.pending == UP

    def test_touch_on_idle_board_starts_once(self, monkeypatch, session, cfg, buttons):
        monkeypatch.setattr(pygame.event, "get", lambda: [click((310, 100))])
        handle_events(session, cfg, buttons)
        assert session.phase is Phase.RUNNING
        assert session.snake.pending == UP

    def test_button_click_does_not_double_toggle(self, monkeypatch, session, cfg, buttons):
        monkeypatch.setattr(pygame.event, "get", lambda: [click(buttons["start"].center)])
        handle_events(session, cfg, buttons)
        assert session.phase is Phase.RUNNING

    @pytest.mark.parametrize("event", [
        pygame.event.Event(pygame.QUIT),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE),
    ])
    def test_quit(self, monkeypatch, session, cfg, buttons, event):
        monkeypatch.setattr(pygame.event, "get", lambda: [event])
        assert handle_events(session, cfg, buttons) is False


class TestCli:
    def test_defaults(self):
        cfg = config_from_args(build_parser().parse_args([]))
        assert cfg.grid_count == 30
        assert cfg.initial_speed == 6.0
        assert cfg.high_score_path is not None

    def test_overrides(self, tmp_path):
        args = build_parser().parse_args(
            ["--grid", "12", "--speed", "3", "--seed", "9",
             "--high-score-file", str(tmp_path / "b.json")]
        )
        cfg = config_from_args(args)
        assert (cfg.grid_count, cfg.initial_speed, cfg.seed) == (12, 3.0, 9)
        assert cfg.high_score_path == tmp_path / "b.json"

    def test_no_save(self):
        cfg = config_from_args(build_parser().parse_args(["--no-save"]))
        assert cfg.high_score_path is None

    @pytest.mark.parametrize("argv", [["--grid", "1"], ["--speed", "0"], ["--fps", "0"]])
    def test_invalid_values(self, argv):
        with pytest.raises(ValueError):
            config_from_args(build_parser().parse_args(argv))
