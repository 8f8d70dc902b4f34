from camera import OrbitCamera
from transform import (apply, perspective, reflect_x, reflect_y, reflect_z,
                       reflect_origin, scale_about_point)

TITLE = "Reflexoes do Cubo"

# Cubo original, afastado dos planos de reflexao para as copias nao se sobreporem
CUBE_CENTER = (40.0, 30.0, 0.0)
CUBE_SIZE = 20.0
CUBE_COLOR = (0.9, 0.9, 0.9)

AXIS_LENGTH = 120.0

FOV = 60.0
ZNEAR, ZFAR = 1.0, 2000.0

# Reflexoes usadas nos modos 0-4
REFLECTIONS = {
    1: ("Reflexao X", reflect_x(), (1.0, 0.3, 0.3)),
    2: ("Reflexao Y", reflect_y(), (0.3, 1.0, 0.3)),
    3: ("Reflexao Z", reflect_z(), (0.3, 0.5, 1.0)),
    4: ("Reflexao na origem", reflect_origin(), (1.0, 0.9, 0.2)),
}

SCALE_FACTOR = 2.0


class Copy:
    """Uma instancia transformada do cubo, tal como vai ser desenhada."""

    def __init__(self, name, matrix, color, filled=True):
        self.name = name
        self.matrix = matrix
        self.color = color
        self.filled = filled

    def faces(self):
        if self.matrix is None:
            return cube_faces()
        return transform_faces(self.matrix, cube_faces())


# modo -> (legenda, copias desenhadas junto ao original)
MODES = {
    0: ("Todas as reflexoes", [Copy(*REFLECTIONS[k]) for k in (1, 2, 3, 4)]),
    1: (REFLECTIONS[1][0], [Copy(*REFLECTIONS[1])]),
    2: (REFLECTIONS[2][0], [Copy(*REFLECTIONS[2])]),
    3: (REFLECTIONS[3][0], [Copy(*REFLECTIONS[3])]),
    4: (REFLECTIONS[4][0], [Copy(*REFLECTIONS[4])]),
    5: ("Escala em torno do centro",
        [Copy("Escala x%g" % SCALE_FACTOR,
              scale_about_point(SCALE_FACTOR, SCALE_FACTOR, SCALE_FACTOR, *CUBE_CENTER),
              (0.8, 0.4, 1.0), filled=False)]),
}


def cube_faces(center=CUBE_CENTER, size=CUBE_SIZE):
    cx, cy, cz = center
    s = size * 0.5
    corners = [
        # Front
        [(-s, -s,  s), ( s, -s,  s), ( s,  s,  s), (-s,  s,  s)],
        # Back
        [( s, -s, -s), (-s, -s, -s), (-s,  s, -s), ( s,  s, -s)],
        # Top
        [(-s,  s,  s), ( s,  s,  s), ( s,  s, -s), (-s,  s, -s)],
        # Bottom
        [(-s, -s, -s), ( s, -s, -s), ( s, -s,  s), (-s, -s,  s)],
        # Right
        [( s, -s,  s), ( s, -s, -s), ( s,  s, -s), ( s,  s,  s)],
        # Left
        [(-s, -s, -s), (-s, -s,  s), (-s,  s,  s), (-s,  s, -s)],
    ]
    return [[(cx + x, cy + y, cz + z) for x, y, z in face] for face in corners]


def transform_faces(M, faces):
    out = []
    for face in faces:
        out.append([apply(M, v)[:3] for v in face])
    return out


def projection(width, height):
    """Matriz de projecao do framebuffer, ou None se estiver vazio (janela minimizada)."""
    if width <= 0 or height <= 0:
        return None
    return perspective(FOV, width / height, ZNEAR, ZFAR)


def scene_copies(mode):
    """Cubo original seguido das copias do `mode`."""
    _, copies = MODES[mode]
    return [Copy("Original", None, CUBE_COLOR)] + list(copies)


class ViewerState:
    """Estado que os callbacks de input alteram (passado explicitamente, sem globais)."""

    def __init__(self, mode=0, camera=None):
        self.mode = mode if mode in MODES else 0
        self.camera = camera if camera is not None else OrbitCamera()
        self.dragging = False
        self.last_x = 0.0
        self.last_y = 0.0
        self.rotate_speed = 0.4  # graus por pixel
        self.tilt_speed = 0.5
        self.should_close = False

    def select_mode(self, mode):
        if mode not in MODES:
            return False
        changed = mode != self.mode
        self.mode = mode
        return changed

    def key(self, char):
        """Trata uma tecla. Devolve True quando o modo muda."""
        if char == "\x1b":
            self.should_close = True
            return False
        if len(char) == 1 and char in "0123456789":
            return self.select_mode(int(char))
        return False

    def press(self, x, y):
        self.dragging = True
        self.last_x, self.last_y = x, y

    def release(self):
        self.dragging = False

    def move(self, x, y):
        if not self.dragging:
            return
        dx = x - self.last_x
        dy = y - self.last_y
        self.last_x, self.last_y = x, y
        self.camera.rotate(-dx * self.rotate_speed)
        self.camera.tilt(dy * self.tilt_speed)

    def scroll(self, yoffset):
        if yoffset > 0:
            self.camera.zoom(0.9)
        elif yoffset < 0:
            self.camera.zoom(1.1)

    def label(self):
        return MODES[self.mode][0]

    def title(self):
        return f"{TITLE} - [{self.mode}] {self.label()}"
