import numpy as np
from flyview import Camera, CameraController, CameraUniform
from flyview.api.events import Key, KeyboardInput

def main():
    """
    Drives the camera without a window.

    The controller only needs key events and a camera, so the movement and
    the uniform bytes can be inspected directly.
    """
    camera = Camera(position=(0, 0, -5), direction=(0, 0, 0), aspect=16 / 9)
    controller = CameraController(speed=0.25)
    uniform = CameraUniform()

    controller.process_input_event(KeyboardInput(Key.W, True))
    controller.process_input_event(KeyboardInput(Key.SPACE, True))
    for _ in range(4):
        controller.tick(camera)
    uniform.update_view_proj(camera)

    print(f"Camera now at {np.round(camera.position, 3)}")
    print(f"Uniform record: {len(uniform.to_bytes())} bytes")
    print(uniform.view_proj)

if __name__ == "__main__":
    main()
