"""
main.py — Bootstrap

1. Load tuning values
2. Create the app with the configured window
3. Push the title menu
4. Run
"""

from core import tuning
from core.app import App
from core.constants import FPS, WINDOW_HEIGHT, WINDOW_WIDTH
from scenes.menu_scene import MenuScene


def main():
    tuning.load()

    app = App(
        title="Beeline",
        width=int(tuning.get("window", "width", WINDOW_WIDTH)),
        height=int(tuning.get("window", "height", WINDOW_HEIGHT)),
        fps=int(tuning.get("window", "fps", FPS)),
    )
    app.push_scene(MenuScene())
    app.run()


if __name__ == "__main__":
    main()
