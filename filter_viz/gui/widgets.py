"""
Reusable UI Widgets
Atomic components with no business logic - just behavior
"""

from PyQt5.QtWidgets import QSlider, QPushButton, QLabel, QApplication
from PyQt5.QtCore import Qt, pyqtSignal, QPoint
from PyQt5.QtGui import QFont

from .theme import slider_style, step_style, DRAG_SENSITIVITY, COLORS, MONO_FONT, FONT_SIZES
from filter_viz.config import map_value, unmap_value, format_value, SIZES


class ValuePopup(QLabel):
    """
    Floating popup that displays a value near a slider handle.
    Shows during drag, hides on release.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFont(QFont(MONO_FONT, FONT_SIZES['small']))
        self.setStyleSheet(f"""
            QLabel {{
                background-color: {COLORS['background_highlight']};
                color: {COLORS['text_bright']};
                border: 1px solid {COLORS['border_light']};
                border-radius: 3px;
                padding: 2px 5px;
            }}
        """)
        self.setAlignment(Qt.AlignCenter)
        self.hide()
        self.setWindowFlags(Qt.ToolTip)
        self.setAttribute(Qt.WA_TransparentForMouseEvents)

    def show_value(self, text, global_pos):
        """Show popup with text at position."""
        self.setText(text)
        self.adjustSize()
        self.move(global_pos.x() + 15, global_pos.y() - self.height() // 2)
        self.show()
        self.raise_()

    def hide_value(self):
        """Hide the popup."""
        self.hide()


class DragSlider(QSlider):
    """
    Vertical slider with click+drag anywhere behavior.
    Click and drag up = increase, drag down = decrease.
    Hold Shift for fine control.

    With a param config attached, emits the mapped (real) value and shows
    it in a ValuePopup during drag.
    """

    # Signal emits normalized 0-1 value
    normalizedValueChanged = pyqtSignal(float)
    # Signal emits mapped value (requires param config)
    mappedValueChanged = pyqtSignal(float)

    def __init__(self, param_config=None, parent=None):
        super().__init__(Qt.Vertical, parent)
        self.setMinimum(0)
        self.setMaximum(1000)
        self.setValue(500)
        self.setStyleSheet(slider_style())
        self.setFixedWidth(SIZES['slider_width'])
        self.setMinimumHeight(SIZES['slider_height_medium'])

        # Drag tracking
        self.dragging = False
        self.drag_start_y = 0
        self.drag_start_value = 0

        self._popup = None
        self._param_config = None

        # Double-click reset (slider units, optional)
        self._double_click_value = None

        if param_config is not None:
            self.set_param_config(param_config)

    def set_param_config(self, param_config):
        """
        Set parameter config for value mapping and popup display.
        param_config: dict with min, max, curve, unit, default
        """
        self._param_config = param_config
        if self._popup is None:
            self._popup = ValuePopup()
        default_pos = int(round(unmap_value(param_config['default'], param_config) * 1000))
        self.setValue(default_pos)
        self._double_click_value = default_pos

    def set_mapped_value(self, value):
        """Place the handle at a real parameter value without emitting."""
        if self._param_config is None:
            return
        self.blockSignals(True)
        self.setValue(int(round(unmap_value(value, self._param_config) * 1000)))
        self.blockSignals(False)

    def get_mapped_value(self):
        """Get the real mapped value based on param config."""
        normalized = self.value() / 1000.0
        if self._param_config is None:
            return normalized
        return map_value(normalized, self._param_config)

    def _emit_value(self):
        self.normalizedValueChanged.emit(self.value() / 1000.0)
        if self._param_config is not None:
            self.mappedValueChanged.emit(self.get_mapped_value())

    def _update_popup(self):
        """Update popup position and value during drag."""
        if self._popup is None or self._param_config is None:
            return
        text = format_value(self.get_mapped_value(), self._param_config)
        self._popup.show_value(text, self._get_handle_global_pos())

    def _get_handle_global_pos(self):
        """Calculate global position of slider handle."""
        groove_margin = 5
        available_height = self.height() - 2 * groove_margin

        # Value position (inverted because 0 is at bottom for vertical)
        value_ratio = (self.value() - self.minimum()) / (self.maximum() - self.minimum())
        handle_y = groove_margin + (1.0 - value_ratio) * available_height

        return self.mapToGlobal(QPoint(self.width(), int(handle_y)))

    def mousePressEvent(self, event):
        """Start drag from current value."""
        if not self.isEnabled():
            return
        if event.button() == Qt.LeftButton:
            self.dragging = True
            self.drag_start_y = event.globalPos().y()
            self.drag_start_value = self.value()
            self._update_popup()

    def mouseMoveEvent(self, event):
        """Drag up = increase, drag down = decrease. Shift = fine control."""
        if not self.isEnabled() or not self.dragging:
            return
        modifiers = QApplication.keyboardModifiers()

        # Drag full height = full range; Shift needs 3x the travel
        travel = self.height() * (3.0 if modifiers & Qt.ShiftModifier else 1.0)

        delta_y = self.drag_start_y - event.globalPos().y()
        value_range = self.maximum() - self.minimum()
        new_value = self.drag_start_value + int((delta_y / travel) * value_range)
        new_value = max(self.minimum(), min(self.maximum(), new_value))

        if new_value != self.value():
            self.setValue(new_value)
            self._emit_value()
            self._update_popup()

    def mouseReleaseEvent(self, event):
        """End drag."""
        if event.button() == Qt.LeftButton:
            self.dragging = False
            if self._popup:
                self._popup.hide_value()

    def mouseDoubleClickEvent(self, event):
        """Reset to the default on double-click."""
        if self._double_click_value is not None:
            self.setValue(self._double_click_value)
            self._emit_value()
        super().mouseDoubleClickEvent(event)


class CycleButton(QPushButton):
    """
    Button that cycles through a list of values.
    - Click = cycle forward
    - Click + drag up/down = change value

    Signals:
        value_changed(str): Emitted when value changes
        index_changed(int): Emitted when index changes
    """

    value_changed = pyqtSignal(str)
    index_changed = pyqtSignal(int)

    def __init__(self, values, initial_index=0, parent=None):
        super().__init__(parent)
        self.values = values
        self.index = initial_index
        self._update_display()

        # Drag tracking
        self.dragging = False
        self.drag_start_y = 0
        self.drag_start_index = 0
        self.moved_during_press = False

    def _update_display(self):
        """Update button text."""
        self.setText(self.values[self.index])

    def _emit_signals(self):
        """Emit both signals."""
        self.value_changed.emit(self.values[self.index])
        self.index_changed.emit(self.index)

    def set_index(self, index):
        """Set value by index (no signals)."""
        if 0 <= index < len(self.values):
            self.index = index
            self._update_display()

    def get_value(self):
        """Get current value."""
        return self.values[self.index]

    def cycle_forward(self):
        """Move to next value, wrapping at the end."""
        self.index = (self.index + 1) % len(self.values)
        self._update_display()
        self._emit_signals()

    def mousePressEvent(self, event):
        """Start drag tracking."""
        if event.button() == Qt.LeftButton:
            self.dragging = True
            self.drag_start_y = event.globalPos().y()
            self.drag_start_index = self.index
            self.moved_during_press = False

    def mouseMoveEvent(self, event):
        """Handle drag - up = higher index, down = lower index. Shift = fine."""
        if not self.dragging:
            return
        modifiers = QApplication.keyboardModifiers()
        if modifiers & Qt.ShiftModifier:
            threshold = DRAG_SENSITIVITY['cycle_fine']
        else:
            threshold = DRAG_SENSITIVITY['cycle_normal']

        delta_y = self.drag_start_y - event.globalPos().y()
        new_index = (self.drag_start_index + int(delta_y / threshold)) % len(self.values)

        if new_index != self.index:
            self.moved_during_press = True
            self.index = new_index
            self._update_display()
            self._emit_signals()

    def mouseReleaseEvent(self, event):
        """End drag. If no movement, cycle forward."""
        if event.button() == Qt.LeftButton:
            if not self.moved_during_press:
                self.cycle_forward()
            self.dragging = False
            self.moved_during_press = False


class StepButton(QPushButton):
    """
    Checkable sequencer step. Checked = armed.
    The playing flag only changes the border highlight.
    """

    def __init__(self, index, armed=False, parent=None):
        super().__init__(parent)
        self.index = index
        self._playing = False
        self.setCheckable(True)
        self.setChecked(armed)
        self.setFixedSize(*SIZES['button_step'])
        self.setAccessibleName(f"Step {index + 1}")
        self.setToolTip(f"Step {index + 1}")
        self.toggled.connect(self._update_style)
        self._update_style()

    def set_playing(self, playing):
        """Highlight as the current step."""
        if playing != self._playing:
            self._playing = playing
            self._update_style()

    def _update_style(self, *_):
        self.setStyleSheet(step_style(armed=self.isChecked(), playing=self._playing))
