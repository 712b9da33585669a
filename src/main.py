# main.py
import sys
from renderer.gradient import generate_gradient_image
from renderer.ppm import write_ppm

IMAGE_WIDTH = 256
IMAGE_HEIGHT = 256
OUTPUT_PATH = "out.ppm"


def render(path: str = OUTPUT_PATH, width: int = IMAGE_WIDTH, height: int = IMAGE_HEIGHT):
    """Generate the gradient image and write it to path as a P3 pixel map."""
    image = generate_gradient_image(width, height)
    write_ppm(image, path)
    return image


def main():
    print(f"Rendering {IMAGE_WIDTH}x{IMAGE_HEIGHT} gradient to {OUTPUT_PATH}")
    try:
        render(OUTPUT_PATH, IMAGE_WIDTH, IMAGE_HEIGHT)
    except OSError as e:
        print(f"Error writing {OUTPUT_PATH}: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Wrote {OUTPUT_PATH}")


if __name__ == "__main__":
    main()
