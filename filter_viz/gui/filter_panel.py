"""
Filter Panel - Collapsible controls under the display

Holds the parameter sliders for the active mode, the LFO/ENV toggle and
the 8-step row. Slider changes are clamped and written straight into the
shared FilterParams; the engine picks them up on the next frame.
"""

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont

from .theme import COLORS, FONT_FAMILY, MONO_FONT, FONT_SIZES, button_style
from .widgets import DragSlider, CycleButton, StepButton
from filter_viz.config import (
    FILTER_PARAMS_BY_KEY, LFO_PANEL_KEYS, ENV_PANEL_KEYS, MOD_MODES,
    SIZES, clamp_param, format_value,
)
from filter_viz.model.modulation import ModMode


class ParamControl(QWidget):
    """Label + slider + value readout for one parameter."""

    value_changed = pyqtSignal(str, float)  # key, value

    def __init__(self, param_config, value, parent=None):
        super().__init__(parent)
        self.param = param_config
        self.setFixedWidth(SIZES['control_width'])

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(SIZES['spacing_tight'])

        label = QLabel(param_config['label'])
        label.setFont(QFont(FONT_FAMILY, FONT_SIZES['tiny'], QFont.Bold))
        label.setAlignment(Qt.AlignCenter)
        label.setStyleSheet(f"color: {COLORS['text_label']};")
        label.setToolTip(param_config['tooltip'])
        layout.addWidget(label)

        self.slider = DragSlider(param_config)
        self.slider.set_mapped_value(value)
        self.slider.mappedValueChanged.connect(self._on_slider_changed)
        layout.addWidget(self.slider, alignment=Qt.AlignHCenter)

        self.readout = QLabel()
        self.readout.setFont(QFont(MONO_FONT, FONT_SIZES['tiny']))
        self.readout.setAlignment(Qt.AlignCenter)
        self.readout.setStyleSheet(f"color: {COLORS['text']};")
        layout.addWidget(self.readout)
        self._show(value)

    def _show(self, value):
        self.readout.setText(format_value(value, self.param))

    def _on_slider_changed(self, value):
        value = clamp_param(self.param['key'], value)
        self._show(value)
        self.value_changed.emit(self.param['key'], value)


class FilterPanel(QWidget):
    """
    Controls for the modulation engine.

    Signals:
        mode_changed(ModMode): mode toggle clicked
        param_changed(str, float): parameter written into params
    """

    mode_changed = pyqtSignal(object)
    param_changed = pyqtSignal(str, float)

    def __init__(self, params, sequencer, parent=None):
        super().__init__(parent)
        self._params = params
        self._sequencer = sequencer
        self._controls = []
        self.step_buttons = []
        self.setup_ui()
        self.set_mode(params.mode)

    def setup_ui(self):
        """Create panel layout."""
        self.setStyleSheet(f"background-color: {COLORS['background']};")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(SIZES['margin_normal'], SIZES['margin_tight'],
                                  SIZES['margin_normal'], SIZES['margin_normal'])
        layout.setSpacing(SIZES['spacing_section'])

        self.controls_layout = QHBoxLayout()
        self.controls_layout.setSpacing(SIZES['spacing_normal'])
        layout.addLayout(self.controls_layout)

        initial = 0 if self._params.mode == ModMode.LFO else 1
        self.mode_toggle = CycleButton(MOD_MODES, initial_index=initial)
        self.mode_toggle.setFixedSize(*SIZES['button_mode'])
        self.mode_toggle.setStyleSheet(button_style(active=True))
        self.mode_toggle.setToolTip("Modulation source: LFO or step envelope")
        self.mode_toggle.index_changed.connect(self._on_mode_index)

        # Step row
        self.step_row = QWidget()
        step_layout = QHBoxLayout(self.step_row)
        step_layout.setContentsMargins(0, 0, 0, 0)
        step_layout.setSpacing(SIZES['spacing_normal'])
        for i, armed in enumerate(self._sequencer.steps):
            btn = StepButton(i, armed)
            btn.toggled.connect(lambda checked, idx=i: self._on_step_toggled(idx, checked))
            self.step_buttons.append(btn)
            step_layout.addWidget(btn)
        step_layout.addStretch()
        layout.addWidget(self.step_row)

    # =========================================================================
    # MODE
    # =========================================================================

    def set_mode(self, mode):
        """Rebuild sliders for mode; step row only in envelope mode."""
        keys = LFO_PANEL_KEYS if mode == ModMode.LFO else ENV_PANEL_KEYS
        self._rebuild_controls(keys)
        self.mode_toggle.set_index(0 if mode == ModMode.LFO else 1)
        self.step_row.setVisible(mode == ModMode.ENVELOPE)

    def _rebuild_controls(self, keys):
        # Detach the toggle so it survives the teardown
        self.controls_layout.removeWidget(self.mode_toggle)
        for control in self._controls:
            self.controls_layout.removeWidget(control)
            control.deleteLater()
        self._controls = []

        while self.controls_layout.count():
            self.controls_layout.takeAt(0)

        for key in keys:
            control = ParamControl(FILTER_PARAMS_BY_KEY[key], getattr(self._params, key))
            control.value_changed.connect(self._on_param_changed)
            self._controls.append(control)
            self.controls_layout.addWidget(control)

        self.controls_layout.addStretch()
        self.controls_layout.addWidget(self.mode_toggle, alignment=Qt.AlignVCenter)

    def _on_mode_index(self, index):
        mode = ModMode.LFO if index == 0 else ModMode.ENVELOPE
        self.mode_changed.emit(mode)

    # =========================================================================
    # PARAMS / STEPS
    # =========================================================================

    def _on_param_changed(self, key, value):
        setattr(self._params, key, value)
        self.param_changed.emit(key, value)

    def _on_step_toggled(self, index, checked):
        self._sequencer.set_step(index, checked)

    def set_playing_step(self, index):
        """Highlight the current step (-1 clears)."""
        for btn in self.step_buttons:
            btn.set_playing(btn.index == index)


class PanelToggle(QPushButton):
    """Chevron button that shows/hides the controls panel."""

    def __init__(self, panel, parent=None):
        super().__init__(parent)
        self._panel = panel
        self.setCheckable(True)
        self.setFlat(True)
        self.setCursor(Qt.PointingHandCursor)
        self.setFont(QFont(FONT_FAMILY, FONT_SIZES['small']))
        self.setStyleSheet(f"""
            QPushButton {{
                color: {COLORS['text_dim']};
                border: none;
                background: transparent;
            }}
            QPushButton:hover {{
                color: {COLORS['text_bright']};
            }}
        """)
        self.toggled.connect(self._on_toggled)
        self._on_toggled(False)

    def _on_toggled(self, open_):
        self._panel.setVisible(open_)
        self.setText(("▴" if open_ else "▾") + " controls")
