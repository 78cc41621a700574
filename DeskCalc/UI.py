# UI.py
""""PySide6 user interface for the desk calculator.

Structure
---------
- CalculatorWindow: history display, View menu and button grid

Responsibilities
----------------
- Build window, display, menu and buttons
- Translate button clicks and key presses into Session actions
- Show history + expression after every action, scrolled to the bottom
- Scale fonts and the display height with the window size
- Persist precision, display height, dark mode and window size via config_manager
- Copy the last history line to the clipboard (Ctrl+C)

Everything runs on the Qt event thread; one action completes before the next starts.
"""""

import sys

from PySide6 import QtWidgets, QtGui
from PySide6.QtCore import Qt, QTimer
import pyperclip

from . import error as E
from . import config_manager as config_manager
from . import Session as Session

# Named keys mapped to the key characters understood by Session.press_key
NAMED_KEYS = {
    int(Qt.Key.Key_Return): Session.KEY_ENTER,
    int(Qt.Key.Key_Enter): Session.KEY_ENTER,
    int(Qt.Key.Key_Escape): Session.KEY_ESCAPE,
    int(Qt.Key.Key_Backspace): Session.KEY_BACKSPACE,
    int(Qt.Key.Key_Delete): Session.KEY_DELETE,
}

# (text, row, column, row span, column span)
BUTTONS = [
    ('C', 0, 0, 1, 1), ('/', 0, 1, 1, 1), ('*', 0, 2, 1, 1), ('-', 0, 3, 1, 1),
    ('7', 1, 0, 1, 1), ('8', 1, 1, 1, 1), ('9', 1, 2, 1, 1), ('+', 1, 3, 1, 1),
    ('4', 2, 0, 1, 1), ('5', 2, 1, 1, 1), ('6', 2, 2, 1, 1), (')', 2, 3, 1, 1),
    ('1', 3, 0, 1, 1), ('2', 3, 1, 1, 1), ('3', 3, 2, 1, 1), ('=', 3, 3, 1, 1),
    ('0', 4, 0, 1, 2), ('.', 4, 2, 1, 1), ('(', 4, 3, 1, 1),
]

DISPLAY_HEIGHT_LABELS = {
    0: "Auto-scale",
    80: "Small (80px)",
    120: "Medium (120px)",
    160: "Large (160px)",
}

RESIZE_THRESHOLD = 5


def precision_label(precision):
    return "1 decimal place" if precision == 1 else f"{precision} decimal places"


def scaled_font_sizes(width, height, maximized=False):
    """Return (display, button, menu) font sizes in px for a window size."""
    width = max(width, 100)
    height = max(height, 150)
    if maximized:
        width = min(width, 1200)
        height = min(height, 800)

    base_size = min(width, height)
    display_font_size = min(max(5, base_size // 20), 20)
    button_font_size = min(max(6, display_font_size * 2 // 3), 16)
    menu_font_size = min(max(8, button_font_size * 4 // 5), 18)
    return display_font_size, button_font_size, menu_font_size


def auto_display_height(line_height, window_height):
    """Five text lines plus padding, at least 80 px and at most 2/3 of the window."""
    final_display_height = max(line_height * 5 + 12, 80)
    return min(final_display_height, window_height * 2 // 3)


class CalculatorWindow(QtWidgets.QWidget):

    def __init__(self, config_path=None):
        super().__init__()

        # --- 1. Load Settings ---
        self.config_path = config_path
        self.setting_value_list = config_manager.load_setting_value("all", config_path)

        # --- 2. Instance State Variables ---
        self.session = Session.CalculatorSession(self.setting_value_list["result_precision"])
        self.button_objects = {}
        self.precision_actions = {}
        self.display_height_actions = {}
        self.last_size = (0, 0)
        self.first_run = True

        # --- 3. Window Setup ---
        self.setWindowTitle("Basic Calculator")
        self.resize(self.setting_value_list["window_width"], self.setting_value_list["window_height"])
        self.setMinimumSize(70, 30)
        main_v_layout = QtWidgets.QVBoxLayout(self)
        main_v_layout.setContentsMargins(10, 10, 10, 10)

        # --- 4. Menu Setup ---
        self.menu_bar = QtWidgets.QMenuBar(self)
        self.menu_bar.setObjectName("menu-bar")
        main_v_layout.setMenuBar(self.menu_bar)
        self.build_view_menu()

        # --- 5. Display Setup ---
        self.display = QtWidgets.QTextEdit()
        self.display.setObjectName("display")
        self.display.setReadOnly(True)
        self.display.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.display.setWordWrapMode(QtGui.QTextOption.WrapMode.WordWrap)
        text_option = self.display.document().defaultTextOption()
        text_option.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.display.document().setDefaultTextOption(text_option)
        main_v_layout.addWidget(self.display)

        # --- 6. Button Grid Setup ---
        expanding_policy = QtWidgets.QSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding
        )
        button_container = QtWidgets.QWidget()
        main_v_layout.addWidget(button_container, 1)
        button_grid = QtWidgets.QGridLayout(button_container)
        button_grid.setSpacing(5)
        button_grid.setContentsMargins(0, 0, 0, 0)
        for j in range(4):
            button_grid.setColumnStretch(j, 1)

        for text, row, col, row_span, col_span in BUTTONS:
            button = QtWidgets.QPushButton(text)
            button.setObjectName("calc-button")
            button.setSizePolicy(expanding_policy)
            # Keyboard focus stays on the window so Enter never re-clicks a button
            button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            button.clicked.connect(lambda checked=False, val=text: self.handle_button_press(val))
            button_grid.addWidget(button, row, col, row_span, col_span)
            self.button_objects[text] = button

        self.update_darkmode()
        self.update_display()

    # --- Menu ---
    def build_view_menu(self):
        view_menu = self.menu_bar.addMenu("View")

        precision_menu = view_menu.addMenu(config_manager.load_setting_description("result_precision"))
        precision_group = QtGui.QActionGroup(self)
        for precision in config_manager.PRECISION_CHOICES:
            action = precision_menu.addAction(precision_label(precision))
            action.setCheckable(True)
            action.setChecked(precision == self.setting_value_list["result_precision"])
            precision_group.addAction(action)
            action.triggered.connect(lambda checked=False, value=precision: self.set_precision(value))
            self.precision_actions[precision] = action

        display_menu = view_menu.addMenu(config_manager.load_setting_description("display_height"))
        display_group = QtGui.QActionGroup(self)
        for height, label in DISPLAY_HEIGHT_LABELS.items():
            action = display_menu.addAction(label)
            action.setCheckable(True)
            action.setChecked(height == self.setting_value_list["display_height"])
            display_group.addAction(action)
            action.triggered.connect(lambda checked=False, value=height: self.set_display_height(value))
            self.display_height_actions[height] = action

        view_menu.addSeparator()
        self.darkmode_action = view_menu.addAction(config_manager.load_setting_description("darkmode"))
        self.darkmode_action.setCheckable(True)
        self.darkmode_action.setChecked(self.setting_value_list["darkmode"])
        self.darkmode_action.toggled.connect(self.set_darkmode)

    def set_precision(self, precision):
        if precision == self.session.precision:
            return
        self.session.set_precision(precision)
        self.setting_value_list["result_precision"] = precision
        QTimer.singleShot(0, self.save_settings)

    def set_display_height(self, height):
        if height == self.setting_value_list["display_height"]:
            return
        self.setting_value_list["display_height"] = height
        self.update_ui_scaling()
        QTimer.singleShot(0, self.save_settings)

    def set_darkmode(self, enabled):
        self.setting_value_list["darkmode"] = enabled
        self.update_darkmode()
        QTimer.singleShot(0, self.save_settings)

    def save_settings(self):
        saved_settings = config_manager.save_setting(self.setting_value_list, self.config_path)
        if saved_settings == {}:
            print("Warning: settings could not be saved (error in config_manager).")

    # --- Input handling ---
    def handle_button_press(self, value):
        self.session.press_key(value)
        self.update_display()

    def keyPressEvent(self, event):
        if event.matches(QtGui.QKeySequence.StandardKey.Copy):
            self.copy_last_result()
            return

        text = NAMED_KEYS.get(int(event.key()), event.text())
        if text and self.session.press_key(text):
            self.update_display()
            event.accept()
            return
        super().keyPressEvent(event)

    def copy_last_result(self):
        if not self.session.history:
            return
        try:
            pyperclip.copy(self.session.history[-1])
        except pyperclip.PyperclipException as e:
            self.show_error(E.MathError(message=str(e), code="4001"))

    def show_error(self, error_obj):
        error_box = QtWidgets.QMessageBox(self)
        error_box.setIcon(QtWidgets.QMessageBox.Critical)
        error_box.setWindowTitle("Calculator error")
        error_box.setText(f"Error {error_obj.code}: {E.ERROR_MESSAGES.get(error_obj.code, 'Unknown error')}")
        error_box.setInformativeText(f"Details: {error_obj.message}")
        error_box.setStandardButtons(QtWidgets.QMessageBox.Ok)
        error_box.exec()

    # --- Display ---
    def update_display(self):
        self.display.setPlainText(self.session.current_display_text())
        QTimer.singleShot(0, self.scroll_display_to_bottom)

    def scroll_display_to_bottom(self):
        self.display.moveCursor(QtGui.QTextCursor.MoveOperation.End)
        self.display.ensureCursorVisible()

    # --- Window/Key Event Handlers ---
    def showEvent(self, event):
        super().showEvent(event)
        if self.first_run:
            self.first_run = False
            self.session.clear()
        self.update_ui_scaling()
        self.update_display()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        width, height = self.width(), self.height()
        last_width, last_height = self.last_size
        if abs(width - last_width) > RESIZE_THRESHOLD or abs(height - last_height) > RESIZE_THRESHOLD:
            self.last_size = (width, height)
            self.setting_value_list["window_width"] = width
            self.setting_value_list["window_height"] = height
            QTimer.singleShot(0, self.save_settings)
            self.update_ui_scaling()

    def update_ui_scaling(self):
        display_font_size, button_font_size, menu_font_size = scaled_font_sizes(
            self.width(), self.height(), self.isMaximized())

        display_font = self.display.font()
        display_font.setBold(True)
        display_font.setPixelSize(display_font_size)
        self.display.setFont(display_font)

        display_height = self.setting_value_list["display_height"]
        if display_height == 0:
            line_height = QtGui.QFontMetrics(display_font).height()
            display_height = auto_display_height(line_height, max(self.height(), 150))
        self.display.setFixedHeight(display_height)

        for button in self.button_objects.values():
            font = button.font()
            font.setPixelSize(button_font_size)
            button.setFont(font)

        menu_font = self.menu_bar.font()
        menu_font.setPixelSize(menu_font_size)
        self.menu_bar.setFont(menu_font)

    def update_darkmode(self):
        # --- Apply Dark/Light Mode ---
        if self.setting_value_list["darkmode"] == True:
            for button in self.button_objects.values():
                button.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
            self.setStyleSheet("background-color: #121212;")
            self.display.setStyleSheet("background-color: #121212; color: white;")
            self.menu_bar.setStyleSheet("color: white;")
        else:
            for button in self.button_objects.values():
                button.setStyleSheet("")
            self.setStyleSheet("")
            self.display.setStyleSheet("")
            self.menu_bar.setStyleSheet("")


def main():
    # --- Main Application Entry Point ---
    app = QtWidgets.QApplication(sys.argv)
    window = CalculatorWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
