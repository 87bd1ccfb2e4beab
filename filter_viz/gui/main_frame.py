"""
Main Frame - Combines display, engine and controls
"""

from PyQt5.QtWidgets import QMainWindow, QWidget, QVBoxLayout
from PyQt5.QtCore import Qt

from filter_viz.gui.animation_driver import AnimationDriver
from filter_viz.gui.filter_display import FilterDisplay
from filter_viz.gui.filter_panel import FilterPanel, PanelToggle
from filter_viz.gui.theme import COLORS, accent
from filter_viz.model.modulation import FilterParams
from filter_viz.modulation.modulation_engine import ModulationEngine
from filter_viz.utils.logger import logger


class MainFrame(QMainWindow):
    """Main application window."""

    def __init__(self, params=None):
        super().__init__()

        self.setWindowTitle("Filter Visualizer")
        self.setMinimumSize(480, 320)
        self.setGeometry(100, 80, 900, 420)

        # Shared parameter set, passed by reference to engine and driver
        self.params = params if params is not None else FilterParams()
        self.engine = ModulationEngine(self.params, on_step_changed=self.on_step_changed)

        self.setup_ui()

        self.driver = AnimationDriver(
            engine=self.engine,
            params=self.params,
            render=self.display.set_curve,
            get_size=self.display.viewport_size,
            accent_color=accent('filter'),
        )

        logger.signal_emitter.log_message.connect(self.on_log_message)

    def setup_ui(self):
        """Create the main interface layout."""
        central = QWidget()
        central.setStyleSheet(f"background-color: {COLORS['background_dark']};")
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.display = FilterDisplay()
        layout.addWidget(self.display, stretch=1)

        self.filter_panel = FilterPanel(self.params, self.engine.sequencer)
        self.filter_panel.mode_changed.connect(self.on_mode_changed)

        # Panel hidden on launch, revealed by the toggle
        self.panel_toggle = PanelToggle(self.filter_panel)
        layout.addWidget(self.panel_toggle, alignment=Qt.AlignHCenter)
        layout.addWidget(self.filter_panel)

        self.statusBar().setStyleSheet(f"color: {COLORS['text_dim']};")

    # =========================================================================
    # ENGINE EVENTS
    # =========================================================================

    def on_mode_changed(self, mode):
        """Mode toggle clicked."""
        self.engine.switch_mode(mode)
        self.filter_panel.set_mode(mode)
        logger.info(f"Modulation source: {mode.name}", component="MOD")

    def on_step_changed(self, index):
        """Highlight callback from the sequencer."""
        if hasattr(self, 'filter_panel'):
            self.filter_panel.set_playing_step(index)

    def on_log_message(self, message, level, timestamp):
        """Mirror log messages in the status bar."""
        self.statusBar().showMessage(f"{timestamp} {message}", 4000)

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def showEvent(self, event):
        super().showEvent(event)
        self.driver.start()

    def closeEvent(self, event):
        self.driver.stop()
        logger.info("Filter Visualizer closing", component="APP")
        super().closeEvent(event)
