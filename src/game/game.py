# src/game/game.py
import sys, argparse
import pygame
from pygame import K_ESCAPE, K_r, K_n
from .config import (
    WIDTH, HEIGHT, FPS, SEED_DEFAULT,
    COLOR_BG, COLOR_FG, COLOR_HINT, COLOR_PLAT, COLOR_ENEMY,
    COLOR_PLAYER, COLOR_PLAYER_SMALL, COLOR_PANEL, COLOR_PANEL_EDGE
)
from .controls import KeyState
from .sim import step_frame, FixedStep
from .world import make_world

LOG_EVENTS = False


def parse_args():
    p = argparse.ArgumentParser()
    p.add_argument("--seed", type=int, default=None,
                   help="Level seed. Omit for SEED_DEFAULT, use -1 for random each launch.")
    return p.parse_args()


def draw_world(surf: pygame.Surface, world, font=None):
    """Render collaborator: world translated by -camera_x, HUD in screen space."""
    surf.fill(COLOR_BG)
    cam = world.camera_x

    for p in world.platforms:
        pygame.draw.rect(surf, COLOR_PLAT, p.to_pygame(cam))
    for e in world.enemies:
        pygame.draw.rect(surf, COLOR_ENEMY, e.to_pygame(cam))

    player = world.player
    color = COLOR_PLAYER_SMALL if player.is_small else COLOR_PLAYER
    pygame.draw.rect(surf, color, player.rect.to_pygame(cam))

    if font is not None:
        hud = f"Lives: {player.lives}   Score: {player.score}   Seed: {world.seed}"
        surf.blit(font.render(hud, True, COLOR_FG), (20, 12))
        surf.blit(font.render("A/D move | W/SPACE jump | SHIFT dash | ESC quit", True, COLOR_HINT),
                  (20, 34))


def draw_game_over(surf: pygame.Surface, font, panel: pygame.Rect):
    pygame.draw.rect(surf, COLOR_PANEL, panel, border_radius=10)
    pygame.draw.rect(surf, COLOR_PANEL_EDGE, panel, width=2, border_radius=10)

    txt = font.render("Restart (R)", True, (220, 235, 255))
    surf.blit(txt, (panel.centerx - txt.get_width()//2,
                    panel.centery - txt.get_height() - 5))
    txt2 = font.render("New Random (N)", True, (220, 235, 255))
    surf.blit(txt2, (panel.centerx - txt2.get_width()//2, panel.centery + 5))


def _log_events(world, ev):
    if ev.stomps or ev.hits or ev.fell or ev.generated:
        print(f"frame={world.frame} x={world.player.x:.1f} stomps={ev.stomps} hits={ev.hits} "
              f"fell={ev.fell} generated={ev.generated} culled={ev.culled} "
              f"lives={world.player.lives} score={world.player.score}")


def run():
    args = parse_args()

    # Resolve seed: None -> use SEED_DEFAULT; -1 -> random
    if args.seed is None:
        launch_seed = SEED_DEFAULT
    elif args.seed == -1:
        launch_seed = None  # make_world picks one
    else:
        launch_seed = args.seed

    pygame.init()
    pygame.display.set_caption("Infinite Jump & Run")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("jetbrainsmono", 18)

    keys = KeyState()
    stepper = FixedStep(FPS)
    world = make_world(launch_seed)

    btn_w, btn_h = 180, 70
    restart_rect = pygame.Rect((WIDTH - btn_w)//2, (HEIGHT - btn_h)//2, btn_w, btn_h)

    while True:
        dt = clock.tick(FPS) / 1000.0
        # game over is decided here, the simulation never stops by itself
        alive = world.player.lives > 0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.KEYDOWN:
                if event.key == K_ESCAPE:
                    pygame.quit(); sys.exit()
                if event.key == K_r and not alive:
                    world = make_world(world.seed)
                    keys.clear()
                    continue
                if event.key == K_n and not alive:
                    world = make_world(None)
                    keys.clear()
                    continue
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and not alive:
                if restart_rect.collidepoint(event.pos):
                    world = make_world(world.seed)
                    keys.clear()
                    continue
            keys.handle_event(event)

        if alive:
            for _ in range(stepper.advance(dt)):
                ev = step_frame(world, keys.snapshot())
                if ev.jumped:
                    keys.consume_jump()
                if LOG_EVENTS:
                    _log_events(world, ev)
                if world.player.lives <= 0:
                    break

        draw_world(screen, world, font)
        if world.player.lives <= 0:
            draw_game_over(screen, font, restart_rect)
        pygame.display.flip()


if __name__ == "__main__":
    run()
