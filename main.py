#main.py

import pygame
import cProfile
import pstats
import constants as C
from preview import TerrainPreview
import logger

def initialize_preview():
    logger.log("Attempting to initialize Pygame...")
    pygame.init()
    logger.log("Pygame initialized successfully.")
    logger.log(f"Creating display surface with width: {C.SCREEN_WIDTH} and height: {C.SCREEN_HEIGHT}")
    screen = pygame.display.set_mode((C.SCREEN_WIDTH, C.SCREEN_HEIGHT))
    pygame.display.set_caption(C.WINDOW_TITLE)
    font = pygame.font.Font(None, C.UI_FONT_SIZE)
    logger.log("Display surface and font created.")
    return screen, font

def run_preview():
    screen, font = initialize_preview()
    clock = pygame.time.Clock()
    preview = TerrainPreview()
    logger.set_preview(preview)
    preview.generate(new_seed=True)

    logger.log("Starting main preview loop...")
    logger.log("CONTROLS: [R] New Seed, [V] Cycle Views, [ARROWS] Pan, [HOME] Reset Pan, drag sliders to tweak.")

    running = True
    while running:
        # Capped so a slow regeneration doesn't turn into a huge pan jump.
        real_delta_seconds = min(clock.tick(C.CLOCK_TICK_RATE) / C.MILLISECONDS_PER_SECOND, 0.25)

        for event in pygame.event.get():
            if event.type == pygame.QUIT: running = False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE: running = False
                if event.key == pygame.K_r: preview.randomize_seed()
                if event.key == pygame.K_v: preview.toggle_view_mode()
                if event.key == pygame.K_HOME: preview.reset_camera()
            if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION):
                preview.handle_event(event)

        preview.update(pygame.key.get_pressed(), real_delta_seconds)

        screen.fill(C.COLOR_BACKGROUND)
        preview.draw(screen, font)
        pygame.display.flip()

    logger.log("Main preview loop ended.")
    return preview

def shutdown_preview(preview):
    logger.log("Writing session graphs...")
    preview.graphing_manager.generate_and_save_graphs()
    logger.log("Quitting Pygame...")
    pygame.quit()
    logger.log("Preview ended cleanly.")

def main():
    logger.log("--- Preview Start ---")
    preview = run_preview()
    shutdown_preview(preview)
    logger.log("--- Preview Exit ---")

if __name__ == '__main__':
    profiler = cProfile.Profile()
    try:
        profiler.run('main()')
    except SystemExit:
        # Lets the preview exit cleanly without a profiler error
        pass
    finally:
        print("\n\n--- PROFILER REPORT ---")
        stats = pstats.Stats(profiler)
        stats.sort_stats(pstats.SortKey.CUMULATIVE)
        stats.print_stats(C.PROFILER_PRINT_LINE_COUNT)
