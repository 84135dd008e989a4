# svg.py
# debug overlay: detected boxes, centres and labels

from .model import DetectionResult

COLOURS = {
    "circle": "#e33",
    "triangle": "#2a2",
    "rectangle": "#36f",
    "pentagon": "#d80",
    "star": "#a3c",
}

def result_svg(result: DetectionResult) -> str:
    w, h = result.image_width, result.image_height
    parts = [f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">',
             '<g fill="none" stroke-width="1">']
    for s in result.shapes:
        b = s.bounding_box; c = COLOURS.get(s.type.value, "#000")
        parts.append(f'<rect x="{b.x}" y="{b.y}" width="{b.width}" height="{b.height}" stroke="{c}" />')
        parts.append(f'<circle cx="{s.center.x}" cy="{s.center.y}" r="2" stroke="{c}" />')
        parts.append(f'<text x="{b.x}" y="{max(b.y - 2, 10)}" fill="{c}" stroke="none" font-size="10">'
                     f'{s.type.value} {s.confidence:.2f}</text>')
    parts.append('</g></svg>')
    return "\n".join(parts)

def write_svg(result: DetectionResult, out_path: str):
    with open(out_path, 'w') as f: f.write(result_svg(result))
