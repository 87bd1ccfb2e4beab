"""
Theme - Centralized color and style definitions
All UI components reference this for consistent styling

Loads from active skin in filter_viz/gui/skins/
"""
from .skins import active as skin

# =============================================================================
# SKIN ACCESS
# =============================================================================

def get(key, default='#ff00ff'):
    """Get value from active skin. Magenta = missing key."""
    return skin.SKIN.get(key, default)

def accent(module_type='filter'):
    """Get accent colour for module type."""
    return get(f'accent_{module_type}')

def accent_dim(module_type='filter'):
    """Get dimmed accent colour for module type."""
    return get(f'accent_{module_type}_dim')


FONT_FAMILY = get('font_family')
MONO_FONT = get('font_mono')

FONT_SIZES = {
    'section': get('font_size_section'),
    'label': get('font_size_label'),
    'small': get('font_size_small'),
    'tiny': get('font_size_tiny'),
}

DRAG_SENSITIVITY = {
    'cycle_normal': get('drag_cycle_normal'),
    'cycle_fine': get('drag_cycle_fine'),
}

COLORS = {
    # UI elements
    'background': get('bg_mid'),
    'background_dark': get('bg_dark'),
    'background_light': get('bg_light'),
    'background_highlight': get('bg_highlight'),
    'border': get('border_dark'),
    'border_light': get('border_light'),
    'text': get('text_mid'),
    'text_bright': get('text_bright'),
    'text_dim': get('text_dim'),
    'text_label': get('text_dim'),

    # Sliders/controls
    'slider_groove': get('slider_groove'),
    'slider_handle': get('slider_handle'),
    'slider_handle_hover': get('slider_handle_hover'),

    # Accent
    'accent_filter': get('accent_filter'),
    'accent_filter_dim': get('accent_filter_dim'),
    'accent_filter_bg': get('accent_filter_bg'),

    # Sequencer
    'step_off': get('step_off_bg'),
    'step_on': get('step_on_bg'),
    'step_on_border': get('step_on_border'),
    'step_playing_border': get('step_playing_border'),
}


# =============================================================================
# STYLE FUNCTIONS
# =============================================================================

def button_style(active=False):
    """Get toggle button stylesheet (accent when active)."""
    if active:
        return f"""
            QPushButton {{
                background-color: {COLORS['accent_filter_bg']};
                color: {COLORS['accent_filter']};
                border: 1px solid {COLORS['accent_filter_dim']};
                border-radius: 3px;
            }}
        """
    return f"""
        QPushButton {{
            background-color: {COLORS['background_dark']};
            color: {COLORS['text']};
            border: 1px solid {COLORS['border']};
            border-radius: 3px;
        }}
        QPushButton:hover {{
            background-color: {COLORS['background_highlight']};
        }}
    """


def slider_style():
    """Get standard vertical slider stylesheet."""
    return f"""
        QSlider {{
            border: none;
            background: transparent;
        }}
        QSlider::groove:vertical {{
            border: 1px solid {get('slider_groove_border')};
            width: 8px;
            background: {COLORS['slider_groove']};
            border-radius: 4px;
        }}
        QSlider::handle:vertical {{
            background: {COLORS['slider_handle']};
            border: 1px solid {get('slider_handle_border')};
            height: 12px;
            margin: 0 -3px;
            border-radius: 6px;
        }}
        QSlider::handle:vertical:hover {{
            background: {COLORS['slider_handle_hover']};
        }}
    """


def step_style(armed=False, playing=False):
    """Sequencer step button style: fill when armed, bright border when playing."""
    bg = COLORS['step_on'] if armed else COLORS['step_off']
    if playing:
        border = COLORS['step_playing_border']
    elif armed:
        border = COLORS['step_on_border']
    else:
        border = COLORS['border']
    return f"""
        QPushButton {{
            background-color: {bg};
            border: 2px solid {border};
            border-radius: 3px;
        }}
    """
