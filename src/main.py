# main.py
import os
import time
import click
import numpy as np
from renderer.image_io import save_image
from renderer.raytracer import MAX_DEPTH, Renderer
from scenes import SceneError, default_scene, load_scene

QUALITY_LEVELS = {
    "preview": {"width": 160, "height": 120, "depth": 2},
    "balanced": {"width": 400, "height": 300, "depth": MAX_DEPTH},
    "high_quality": {"width": 800, "height": 600, "depth": 8},
}

def show_preview(framebuffer: np.ndarray, title: str = "Ray Tracer"):
    """
    Display a finished frame in a pygame window until it is closed or Escape
    is pressed.
    """
    import pygame

    height, width = framebuffer.shape[:2]
    pixels = (framebuffer * 255).clip(0, 255).astype("uint8")

    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        # pygame surfaces are indexed (x, y).
        surface = pygame.surfarray.make_surface(pixels.transpose(1, 0, 2))
        screen.blit(surface, (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()

@click.command()
@click.option("--scene", "scene_path", type=click.Path(dir_okay=False), default=None,
              help="JSON scene description; the built-in scene is used when omitted.")
@click.option("--quality", type=click.Choice(sorted(QUALITY_LEVELS)), default="balanced")
@click.option("--width", type=click.INT, default=None, help="Overrides the quality preset.")
@click.option("--height", type=click.INT, default=None, help="Overrides the quality preset.")
@click.option("--depth", type=click.INT, default=None, help="Reflection recursion budget.")
@click.option("--seed", type=click.INT, default=None, help="Seed for the starfield background.")
@click.option("--output-path", type=click.Path(dir_okay=False), default="./output/render.ppm")
@click.option("--preview/--no-preview", default=False, help="Show the result in a pygame window.")
def main(scene_path, quality, width, height, depth, seed, output_path, preview):
    settings = dict(QUALITY_LEVELS[quality])
    if width is not None:
        settings["width"] = width
    if height is not None:
        settings["height"] = height
    if depth is not None:
        settings["depth"] = depth
    if settings["width"] <= 0 or settings["height"] <= 0:
        raise click.BadParameter("image dimensions must be positive")

    try:
        world = load_scene(scene_path) if scene_path else default_scene()
    except (FileNotFoundError, SceneError) as e:
        raise click.ClickException(str(e))

    print("\n=== Rendering ===")
    print(f"Resolution: {settings['width']}x{settings['height']}")
    print(f"Max depth: {settings['depth']}")
    print(f"Objects: {len(world.objects)}, lights: {len(world.lights)}")

    renderer = Renderer(settings["width"], settings["height"],
                        max_depth=settings["depth"], seed=seed)
    start = time.perf_counter()
    image = renderer.render(world, progress=True)
    print(f"Rendered in {time.perf_counter() - start:.2f}s")

    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
    save_image(output_path, image)
    print(f"Saved {output_path}")

    if preview:
        show_preview(image)

if __name__ == "__main__":
    main()
