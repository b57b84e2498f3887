"""Fixed demonstration tree used to seed an editing session."""

from .core.node import File, Folder

DEMO_ROOT_NAME = "projet"


def create_demo_structure() -> Folder:
    """Build a fresh copy of the demo project tree.

    Structure (sizes in KB, 140 in total):
    projet/
    ├── src/
    │   ├── index.ts       15
    │   ├── app.ts         25
    │   └── components/
    │       ├── Button.tsx  8
    │       ├── Card.tsx   12
    │       └── Modal.tsx  18
    ├── assets/
    │   ├── logo.png       45
    │   └── styles.css     10
    ├── package.json        2
    └── README.md           5

    Returns:
        New root folder; every call returns an independent tree
    """
    root = Folder(DEMO_ROOT_NAME)

    src = Folder("src")
    src.add(File("index.ts", 15))
    src.add(File("app.ts", 25))

    components = Folder("components")
    components.add(File("Button.tsx", 8))
    components.add(File("Card.tsx", 12))
    components.add(File("Modal.tsx", 18))
    src.add(components)

    assets = Folder("assets")
    assets.add(File("logo.png", 45))
    assets.add(File("styles.css", 10))

    root.add(src)
    root.add(assets)
    root.add(File("package.json", 2))
    root.add(File("README.md", 5))

    return root
