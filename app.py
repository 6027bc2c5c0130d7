"""
App shell: window and main loop. The simulation ticks at a fixed cadence from elapsed
time (independent of frame rate); editor input is handled between ticks, and the deck
is redrawn only when a tick or an edit made the view stale.
"""

import logging

import pygame

from starship import Editor, Simulation
import config
from ui.deck_view import cell_at, draw_deck, load_sprites

TITLE = "Frontier"
BLOCKS_DIR = config.ROOT_DIR / "res" / "blocks"
TITLE_FONT_SIZE = 28
LABEL_FONT_SIZE = 16

logger = logging.getLogger(__name__)


def handle_key(event: pygame.event.Event, editor: Editor) -> tuple[bool, str | None]:
    """Returns (redraw, request) where request is "reload", "save" or None."""
    key = event.key
    if key == pygame.K_UP:
        return editor.switch_deck(1), None
    if key == pygame.K_DOWN:
        return editor.switch_deck(-1), None
    if key == pygame.K_DELETE:
        return editor.remove(), None
    if key == pygame.K_ESCAPE:
        return editor.cancel(), None
    if key == pygame.K_F1:
        return editor.set_show_info(True), None
    if key == pygame.K_F2:
        return editor.set_show_info(False), None
    if key == pygame.K_F5:
        return False, "reload"
    if key == pygame.K_F6:
        return False, "save"
    return editor.place(event.unicode), None


def handle_mouse(event: pygame.event.Event, editor: Editor, cell: int, title_h: int) -> bool:
    x, y = cell_at(event.pos[0], event.pos[1], cell, title_h)
    if event.type == pygame.MOUSEBUTTONDOWN:
        if event.button == 1:
            return editor.start_drag(x, y)
        if event.button == 3:
            return editor.select(x, y)
        return False
    if event.type == pygame.MOUSEBUTTONUP:
        return editor.end_drag() if event.button == 1 else False
    if event.type == pygame.MOUSEMOTION and event.buttons[0]:
        return editor.drag_to(x, y)
    return False


def run() -> None:
    settings = config.load_settings()
    logging.basicConfig(
        level=getattr(logging, str(settings["log_level"]).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ship_path = settings["ship_path"]
    cell = int(settings["cell_size"])
    title_h = int(settings["title_height"])

    simulation = Simulation(
        config.load_ship(ship_path),
        tick_interval_ms=settings["tick_interval_ms"],
        max_ticks_per_frame=settings["max_ticks_per_frame"],
    )
    editor = Editor(simulation, show_info=bool(settings["show_info"]))

    pygame.init()
    screen = pygame.display.set_mode((settings["window"]["width"], settings["window"]["height"]), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    fonts = (pygame.font.Font(None, TITLE_FONT_SIZE), pygame.font.Font(None, LABEL_FONT_SIZE))
    sprites = load_sprites(BLOCKS_DIR)
    logger.info("%d sprites from %s", len(sprites), BLOCKS_DIR)

    redraw = True
    running = True

    while running:
        dt_s = clock.tick(settings["frame_rate"]) / 1000.0
        request = None

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            if event.type == pygame.VIDEORESIZE:
                redraw = True
            elif event.type == pygame.KEYDOWN:
                changed, req = handle_key(event, editor)
                redraw = redraw or changed
                request = req or request
            elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION):
                if handle_mouse(event, editor, cell, title_h):
                    redraw = True

        if request == "save":
            try:
                config.save_ship(simulation.ship, ship_path)
            except OSError as e:
                logger.error("Save failed: %s", e)
        elif request == "reload":
            try:
                simulation.replace(config.load_ship(ship_path))
            except config.ShipFormatError as e:
                logger.error("Reload failed, keeping current ship: %s", e)
            else:
                editor.reset()
                redraw = True

        if simulation.advance(dt_s):
            redraw = True

        if redraw:
            redraw = False
            draw_deck(
                screen,
                simulation.ship.deck,
                simulation.ship.title(),
                sprites,
                fonts,
                show_info=editor.show_info,
                dragging=editor.dragging,
                editing=editor.editing,
                cell=cell,
                title_h=title_h,
            )
            pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    run()
