import sys
import argparse
import numpy as np
import glfw
from OpenGL.GL import *

from scene import (ViewerState, MODES, AXIS_LENGTH, projection, scene_copies)

# Constantes
WIN_WIDTH = 1024
WIN_HEIGHT = 768

def load_matrix(M):
    # numpy e row-major, OpenGL espera column-major
    glLoadMatrixf(np.ascontiguousarray(M.T, dtype=np.float32))

def draw_axes():
    L = AXIS_LENGTH
    glLineWidth(1.0)
    glBegin(GL_LINES)
    glColor3f(0.8, 0.2, 0.2); glVertex3f(-L, 0, 0); glVertex3f(L, 0, 0)
    glColor3f(0.2, 0.8, 0.2); glVertex3f(0, -L, 0); glVertex3f(0, L, 0)
    glColor3f(0.2, 0.4, 0.9); glVertex3f(0, 0, -L); glVertex3f(0, 0, L)
    glEnd()

def draw_copy(copy):
    faces = copy.faces()
    if copy.filled:
        glColor3f(*copy.color)
        glBegin(GL_QUADS)
        for face in faces:
            for v in face: glVertex3f(*v)
        glEnd()
        edge = (0.1, 0.1, 0.1)
    else:
        edge = copy.color

    # arestas
    glColor3f(*edge)
    glLineWidth(2.0)
    for face in faces:
        glBegin(GL_LINE_LOOP)
        for v in face: glVertex3f(*v)
        glEnd()

def display(state, width, height):
    P = projection(width, height)
    if P is None: return

    glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)
    glViewport(0, 0, width, height)

    glMatrixMode(GL_PROJECTION)
    load_matrix(P)

    glMatrixMode(GL_MODELVIEW)
    V, _ = state.camera.get_view_matrix()
    load_matrix(V)

    draw_axes()
    for copy in scene_copies(state.mode):
        draw_copy(copy)

def init_gl():
    glClearColor(0.1, 0.1, 0.1, 1.0)
    glEnable(GL_DEPTH_TEST)
    # afastar as faces das arestas
    glEnable(GL_POLYGON_OFFSET_FILL)
    glPolygonOffset(1.0, 1.0)

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Cubo e as suas reflexoes (OpenGL imediato).")
    parser.add_argument("--width", type=int, default=WIN_WIDTH)
    parser.add_argument("--height", type=int, default=WIN_HEIGHT)
    parser.add_argument("--mode", type=int, default=0, choices=sorted(MODES),
                        help="modo inicial (0-5)")
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    state = ViewerState(mode=args.mode)

    if not glfw.init():
        print("Falha ao inicializar o GLFW")
        sys.exit(1)

    window = glfw.create_window(args.width, args.height, state.title(), None, None)
    if not window:
        glfw.terminate()
        print("Falha ao criar a janela")
        sys.exit(1)

    glfw.make_context_current(window)
    glfw.swap_interval(1)
    init_gl()

    def key_callback(window, key, scancode, action, mods):
        if action != glfw.PRESS: return
        if key == glfw.KEY_ESCAPE:
            state.key("\x1b")
        elif glfw.KEY_0 <= key <= glfw.KEY_9:
            if state.key(chr(key)):
                glfw.set_window_title(window, state.title())
        if state.should_close:
            glfw.set_window_should_close(window, True)

    def mouse_button_callback(window, button, action, mods):
        if button != glfw.MOUSE_BUTTON_LEFT: return
        if action == glfw.PRESS:
            x, y = glfw.get_cursor_pos(window)
            state.press(x, y)
        elif action == glfw.RELEASE:
            state.release()

    def cursor_pos_callback(window, xpos, ypos):
        state.move(xpos, ypos)

    def scroll_callback(window, xoffset, yoffset):
        state.scroll(yoffset)

    glfw.set_key_callback(window, key_callback)
    glfw.set_mouse_button_callback(window, mouse_button_callback)
    glfw.set_cursor_pos_callback(window, cursor_pos_callback)
    glfw.set_scroll_callback(window, scroll_callback)

    while not glfw.window_should_close(window):
        glfw.poll_events()
        width, height = glfw.get_framebuffer_size(window)
        display(state, width, height)
        glfw.swap_buffers(window)

    glfw.terminate()

if __name__ == "__main__":
    main()
