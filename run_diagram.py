from pathlib import Path

from crustacean_shapes import ConsoleRenderer, Rect, render_frame, save_frame, showcase_diagram
from crustacean_shapes.rendering import SVGRenderer
from crustacean_shapes.utils import get_target_run_folder

DRAWING_AREA = Rect(x=0.0, y=0.0, width=375.0, height=667.0)


def main():
    target_run_folder = Path(get_target_run_folder(application_name="showcase"))

    # Sample diagram nested inside itself, plus a bubble
    diagram = showcase_diagram(DRAWING_AREA, nest=True, nest_scale=0.3, bubble=True)

    console = ConsoleRenderer()
    console.rectangle_at(DRAWING_AREA)
    print("--- canvas above, diagram below ---")
    diagram.draw(console)

    svg = SVGRenderer(width=int(DRAWING_AREA.width), height=int(DRAWING_AREA.height))
    diagram.draw(svg)
    (target_run_folder / "showcase.html").write_text(svg.html_string)

    frame = render_frame(diagram, width=int(DRAWING_AREA.width), height=int(DRAWING_AREA.height))
    save_frame(frame, target_run_folder / "showcase.png")

    print(f"Showcase completed. Output: {target_run_folder}")


if __name__ == "__main__":
    main()
