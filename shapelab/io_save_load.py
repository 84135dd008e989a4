# io_save_load.py
# load/save helpers

from PIL import Image
import numpy as np, pathlib as _p

from .model import PixelBuffer


def load_rgba(path: str) -> PixelBuffer:
    with Image.open(path) as im:
        arr = np.array(im.convert('RGBA'), dtype=np.uint8)
    return PixelBuffer.from_array(arr)

def save_json(path: str, obj: dict):
    import json, os
    _p.Path(os.path.dirname(path) or ".").mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f: json.dump(obj, f, ensure_ascii=False, indent=2)
