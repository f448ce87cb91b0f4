"""Menu widgets: clickable buttons and the swipeable cut-scene book."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Callable, Optional

from pizzeria_engine.entity import GameObject
from pizzeria_engine.keys import Key, KeyState
from pizzeria_engine.vector import Vector2

SCENE_MAIN = "MAIN"
SCENE_STAGE01 = "STAGE01"
UI_GROUP = "UI"

TOUCH_SOUND = "SE_UI_Touch"
PAGE_SOUND = "SE_pages"
UI_CHANNEL = "ui"
PAGE_CHANNEL = "page"
SOUND_VOLUME = 1.0

SCREEN_WIDTH = 1920
SCREEN_SIZE = Vector2(1920.0, 1080.0)
DRAG_THRESHOLD = 100.0
DRAG_SCALE = 1.5
DEFAULT_PAGE_COUNT = 16
SKIP_PAGE = 5
SKIP_POS = Vector2(1700.0, 50.0)
SKIP_SCALE = Vector2(250.0, 125.0)
SKIP_TEXTURE = "skipBtnUI"

PageDraw = tuple[Optional[int], int, int]


def _play(game: Any, name: str, channel: str) -> None:
    sound = getattr(game, "sound", None)
    if sound is not None:
        sound.play(name, channel, SOUND_VOLUME)


class ButtonFunction(Enum):
    CHANGE_SCENE = auto()
    PAUSE_UI = auto()
    DELETE_PARENT_UI = auto()


class Button(GameObject):
    """A UI button that changes scene, opens the pause menu or closes its parent."""

    def __init__(
        self,
        has_animation: bool = False,
        on_pause: Callable[[Any], GameObject] | None = None,
    ) -> None:
        super().__init__()
        self.has_animation = has_animation
        self.on_pause = on_pause
        self.function = ButtonFunction.CHANGE_SCENE
        self.scene: Any = None
        self.parent: GameObject | None = None

    def set_scene(self, scene: Any) -> None:
        """Make the button switch to ``scene`` when clicked."""
        self.function = ButtonFunction.CHANGE_SCENE
        self.scene = scene

    def set_function(self, function: ButtonFunction) -> None:
        self.function = function

    def update(self, game: Any) -> None:
        """Buttons have no per-frame logic of their own."""

    def on_mouse_down(self, game: Any) -> None:
        _play(game, TOUCH_SOUND, UI_CHANNEL)

    def on_click(self, game: Any) -> None:
        """Carry out the button's function."""
        if self.function is ButtonFunction.CHANGE_SCENE:
            game.events.change_scene(self.scene)
        elif self.function is ButtonFunction.PAUSE_UI:
            if not game.world.is_paused:
                if self.on_pause is None:
                    raise ValueError("pause button has no pause menu factory")
                game.events.create_object(self.on_pause(game), UI_GROUP)
        elif self.function is ButtonFunction.DELETE_PARENT_UI:
            game.world.play_game()
            game.events.delete_object(self.parent)

    def source_offset(self, width: int, pressed: bool) -> int | None:
        """Source x of the sprite half to draw, or ``None`` for a plain button."""
        if not self.has_animation:
            return None
        return width // 2 if pressed else 0


class CutScene(GameObject):
    """Pages turned by dragging the mouse or with the left and right keys."""

    def __init__(self, page_count: int = DEFAULT_PAGE_COUNT) -> None:
        if page_count < 1:
            raise ValueError(f"a cut scene needs at least one page, got {page_count}")
        super().__init__()
        self.scale = SCREEN_SIZE
        self.page_count = page_count
        self.current_page = 0
        self.drag_distance = 0.0
        self.start_drag = Vector2()
        self.skip_added = False

    @property
    def last_page(self) -> int:
        return self.page_count - 1

    def _turn(self, game: Any, forward: bool) -> None:
        _play(game, PAGE_SOUND, PAGE_CHANNEL)
        if forward:
            if self.current_page == self.last_page:
                game.events.change_scene(SCENE_STAGE01)
            else:
                self.current_page += 1
        elif self.current_page == 0:
            game.events.change_scene(SCENE_MAIN)
        else:
            self.current_page -= 1

    def on_mouse_down(self, game: Any) -> None:
        self.start_drag = game.keys.mouse_pos

    def on_mouse_over(self, game: Any, pressed: bool) -> None:
        """While the button is held, track how far the mouse has been dragged."""
        if pressed:
            self.drag_distance = self.start_drag.x - game.keys.mouse_pos.x

    def on_mouse_up(self, game: Any) -> None:
        """Turn the page if the drag went far enough, then reset the drag."""
        if self.drag_distance >= DRAG_THRESHOLD:
            self._turn(game, forward=True)
        elif self.drag_distance <= -DRAG_THRESHOLD:
            self._turn(game, forward=False)
        self.drag_distance = 0.0

    def update(self, game: Any) -> None:
        """Add the skip button at the tutorial and handle arrow-key page turns."""
        if not self.skip_added and self.current_page == SKIP_PAGE:
            self.skip_added = True
            skip = Button(has_animation=True)
            skip.pos = SKIP_POS
            skip.scale = SKIP_SCALE
            skip.texture = SKIP_TEXTURE
            skip.set_scene(SCENE_STAGE01)
            game.events.create_object(skip, UI_GROUP)

        if game.keys.is_key_state(Key.RIGHT, KeyState.TAP):
            self._turn(game, forward=True)
        if game.keys.is_key_state(Key.LEFT, KeyState.TAP):
            self._turn(game, forward=False)

    def page_layout(self) -> list[PageDraw]:
        """``(page, dest_x, src_x)`` blits for this frame; ``None`` is a blank page."""
        drag = self.drag_distance * DRAG_SCALE
        if self.drag_distance >= 0:
            following = (
                None if self.current_page == self.last_page else self.current_page + 1
            )
            return [
                (self.current_page, 0, int(drag)),
                (following, SCREEN_WIDTH - int(drag), 0),
            ]
        previous = None if self.current_page == 0 else self.current_page - 1
        return [
            (previous, -SCREEN_WIDTH - int(drag), 0),
            (self.current_page, int(-drag), 0),
        ]