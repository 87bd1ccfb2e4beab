"""
Default Skin - Dark

Dark theme with a single accent colour for the response curve.
"""
import platform

SKIN = {
    # ==========================================================================
    # PALETTE - Base colours everything derives from
    # ==========================================================================

    # Backgrounds (darkest to lightest)
    'bg_darkest': '#000000',
    'bg_dark': '#0d0d0d',
    'bg_base': '#141414',
    'bg_mid': '#1a1a1a',
    'bg_light': '#242424',
    'bg_highlight': '#2e2e2e',

    # Borders
    'border_dark': '#2a2a2a',
    'border_mid': '#3a3a3a',
    'border_light': '#4a4a4a',

    # Text (dimmest to brightest)
    'text_dim': '#606060',
    'text_mid': '#909090',
    'text_bright': '#d0d0d0',

    # ==========================================================================
    # ACCENTS
    # ==========================================================================

    # Response curve
    'accent_filter': '#00ccff',
    'accent_filter_dim': '#0088aa',
    'accent_filter_bg': '#0a1a25',

    # ==========================================================================
    # CONTROLS - Sliders, buttons, steps
    # ==========================================================================

    # Sliders
    'slider_groove': '#1a1a1a',
    'slider_groove_border': '#3a3a3a',
    'slider_handle': '#808080',
    'slider_handle_hover': '#a0a0a0',
    'slider_handle_border': '#4a4a4a',

    # Sequencer steps
    'step_off_bg': '#141414',
    'step_on_bg': '#0a1a25',
    'step_on_border': '#0088aa',
    'step_playing_border': '#00ccff',

    # ==========================================================================
    # FONTS
    # ==========================================================================

    'font_family': 'Helvetica',
    'font_mono': 'Menlo' if platform.system() == 'Darwin' else 'Consolas',

    'font_size_section': 12,
    'font_size_label': 10,
    'font_size_small': 9,
    'font_size_tiny': 8,

    # ==========================================================================
    # INTERACTION
    # ==========================================================================

    'drag_cycle_normal': 15,
    'drag_cycle_fine': 40,
}
