import argparse
from .api.controller import DEFAULT_SPEED
from .api.mouselook import DEFAULT_SENSITIVITY
from .api.viewer import view

def main(argv=None):
    parser = argparse.ArgumentParser(prog='flyview', description='Fly a camera around a 3D model.')
    parser.add_argument('model', help='model file (.obj, .stl, .ply, .glb, ...)')
    parser.add_argument('--texture', help='image sampled with the model texture coordinates')
    parser.add_argument('--width', type=int, default=1280)
    parser.add_argument('--height', type=int, default=720)
    parser.add_argument('--speed', type=float, default=DEFAULT_SPEED, help='movement per frame in world units')
    parser.add_argument('--sensitivity', type=float, default=DEFAULT_SENSITIVITY, help='degrees per pixel of mouse motion')
    parser.add_argument('--watch', action='store_true', help='hot-reload shaders from the glsl/ directory')
    args = parser.parse_args(argv)
    view(args.model, texture=args.texture, width=args.width, height=args.height,
         speed=args.speed, sensitivity=args.sensitivity, watch=args.watch)

if __name__ == "__main__":
    main()
