import math
import numpy as np
from matrix import multiply

# Geradores 4x4 homogeneos. Devolvem arrays row-major (float64 por omissao,
# para apply() nao arredondar pontos em dupla precisao) que multiply() aceita
# diretamente como operando esquerdo de um ponto-coluna.

def translation(tx, ty, tz, dtype=np.float64):
    M = np.eye(4, dtype=dtype)
    M[0,3]=tx; M[1,3]=ty; M[2,3]=tz
    return M

def scale(sx, sy=None, sz=None, dtype=np.float64):
    if sy is None: sy = sx
    if sz is None: sz = sx
    M = np.eye(4, dtype=dtype)
    M[0,0]=sx; M[1,1]=sy; M[2,2]=sz
    return M

def scale_about_point(sx, sy, sz, px, py, pz, dtype=np.float64):
    # T(p) * S * T(-p) numa so matriz
    M = scale(sx, sy, sz, dtype=dtype)
    M[0,3] = px * (1.0 - sx)
    M[1,3] = py * (1.0 - sy)
    M[2,3] = pz * (1.0 - sz)
    return M

def reflect_x(dtype=np.float64):
    M = np.eye(4, dtype=dtype)
    M[0,0] = -1.0
    return M

def reflect_y(dtype=np.float64):
    M = np.eye(4, dtype=dtype)
    M[1,1] = -1.0
    return M

def reflect_z(dtype=np.float64):
    M = np.eye(4, dtype=dtype)
    M[2,2] = -1.0
    return M

def reflect_origin(dtype=np.float64):
    M = np.eye(4, dtype=dtype)
    M[0,0] = -1.0; M[1,1] = -1.0; M[2,2] = -1.0
    return M

def point(x, y, z):
    return [[x], [y], [z], [1]]

def apply(M, p):
    """Aplica M ao ponto p = (x, y, z); devolve (x, y, z, w)."""
    col = multiply(M, point(*p))
    return tuple(row[0] for row in col)

# Projecao para o visualizador

def perspective(fovy_deg, aspect, znear, zfar):
    f = 1.0 / math.tan(math.radians(fovy_deg) / 2.0)
    M = np.zeros((4,4), dtype=np.float32)
    M[0,0] = f/aspect; M[1,1] = f
    M[2,2] = (zfar + znear) / (znear - zfar)
    M[2,3] = (2.0 * zfar * znear) / (znear - zfar)
    M[3,2] = -1.0
    return M

def lookAt(eye, center, up):
    eye = np.array(eye, dtype=np.float32)
    center = np.array(center, dtype=np.float32)
    up = np.array(up, dtype=np.float32)
    f = center - eye; f = f / np.linalg.norm(f)
    u = up / np.linalg.norm(up)
    s = np.cross(f, u); s = s / np.linalg.norm(s)
    u = np.cross(s, f)
    M = np.eye(4, dtype=np.float32)
    M[0,0:3] = s; M[1,0:3] = u; M[2,0:3] = -f
    T = translation(-eye[0], -eye[1], -eye[2], dtype=np.float32)
    return M @ T
