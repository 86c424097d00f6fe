import sys
from flyview import view

def main():
    """
    Flies around a model file given on the command line.

    This example shows how to:
    - Open a model with a texture.
    - Tune movement speed and mouse sensitivity.
    - Hot-reload the shaders in flyview/glsl/ while the window is open.
    """
    if len(sys.argv) < 2:
        print("usage: python example_viewer.py MODEL [TEXTURE]")
        return
    texture = sys.argv[2] if len(sys.argv) > 2 else None
    view(sys.argv[1], texture=texture, speed=0.1, sensitivity=0.3, watch=True)

if __name__ == "__main__":
    main()
