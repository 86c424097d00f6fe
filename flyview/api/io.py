import sys
from pathlib import Path
import numpy as np

GLSL_DIR = Path(__file__).parent.parent / 'glsl'
GLSL_SOURCES = {}

def load_all_glsl(reload=False):
    """Reads every .glsl file in the package's glsl/ directory, keyed by stem."""
    if GLSL_SOURCES and not reload: return
    GLSL_SOURCES.clear()
    if not GLSL_DIR.exists():
        return
    for glsl_file in GLSL_DIR.glob('*.glsl'):
        with open(glsl_file, 'r') as f: GLSL_SOURCES[glsl_file.stem] = f.read()

def get_shader_source(name: str) -> str:
    if not GLSL_SOURCES: load_all_glsl()
    try:
        return GLSL_SOURCES[name]
    except KeyError:
        raise FileNotFoundError(f"Shader '{name}.glsl' not found in {GLSL_DIR}")


class Mesh:
    """Triangle geometry handed to the renderer."""
    def __init__(self, positions, indices, tex_coords=None):
        self.positions = np.asarray(positions, dtype='f4').reshape(-1, 3)
        if tex_coords is None or len(tex_coords) == 0:
            self.tex_coords = np.zeros((len(self.positions), 2), dtype='f4')
        else:
            self.tex_coords = np.asarray(tex_coords, dtype='f4').reshape(-1, 2)
        self.indices = np.asarray(indices, dtype='u4').ravel()

    def vertex_data(self) -> np.ndarray:
        """Interleaved (x, y, z, u, v) rows."""
        return np.hstack([self.positions, self.tex_coords]).astype('f4')

    def __len__(self):
        return len(self.indices)


def _to_viewer_axes(positions: np.ndarray) -> np.ndarray:
    # Model files are Z-up; the viewer is Y-up and looks down +Z.
    return np.stack([-positions[:, 0], positions[:, 2], -positions[:, 1]], axis=1)

def load_model(path, verbose=True) -> Mesh:
    """
    Loads a triangle mesh from a model file.

    Args:
        path (str): Any format `trimesh` reads (.obj, .stl, .ply, .glb...).
                    Scenes with several meshes are concatenated.
        verbose (bool, optional): Print a summary of the loaded geometry.
    """
    import trimesh
    loaded = trimesh.load(str(path), force='mesh', process=False)
    if len(loaded.faces) == 0:
        raise ValueError(f"No triangles found in '{path}'.")

    uv = getattr(loaded.visual, 'uv', None)
    mesh = Mesh(
        positions=_to_viewer_axes(np.asarray(loaded.vertices, dtype='f4')),
        indices=np.asarray(loaded.faces),
        tex_coords=None if uv is None else np.asarray(uv),
    )
    if verbose:
        print(f"INFO: Loaded '{Path(path).name}': {len(mesh.positions)} vertices, {len(mesh.indices) // 3} triangles.")
    return mesh

def load_texture(path):
    """Returns (size, rgba_bytes) for an image file, flipped for OpenGL."""
    from PIL import Image
    try:
        image = Image.open(path).convert('RGBA').transpose(Image.Transpose.FLIP_TOP_BOTTOM)
    except FileNotFoundError:
        print(f"ERROR: Texture not found: {path}", file=sys.stderr)
        raise
    return image.size, image.tobytes()
