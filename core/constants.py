"""
Constants and mapping tables for the UI builder.

Lookup tables used to translate style values into Tailwind utility classes.
"""

# Pixel values on the Tailwind spacing scale (padding, margin, gap)
SPACING_SCALE = {
    '0px': '0',
    '1px': 'px',
    '2px': '0.5',
    '4px': '1',
    '6px': '1.5',
    '8px': '2',
    '10px': '2.5',
    '12px': '3',
    '14px': '3.5',
    '16px': '4',
    '20px': '5',
    '24px': '6',
    '28px': '7',
    '32px': '8',
    '36px': '9',
    '40px': '10',
    '44px': '11',
    '48px': '12',
    '56px': '14',
    '64px': '16',
    '80px': '20',
    '96px': '24',
    '112px': '28',
    '128px': '32',
}

# Hex colors with a named Tailwind equivalent (keys are lower-case)
COLOR_NAMES = {
    '#ffffff': 'white',
    '#000000': 'black',
    '#f3f4f6': 'gray-100',
    '#e5e7eb': 'gray-200',
    '#d1d5db': 'gray-300',
    '#9ca3af': 'gray-400',
    '#6b7280': 'gray-500',
    '#4b5563': 'gray-600',
    '#374151': 'gray-700',
    '#1f2937': 'gray-800',
    '#111827': 'gray-900',
}

DISPLAY_CLASSES = {
    'block': 'block',
    'inline-block': 'inline-block',
    'inline': 'inline',
    'flex': 'flex',
    'grid': 'grid',
    'none': 'hidden',
}

POSITION_CLASSES = {
    'static': 'static',
    'relative': 'relative',
    'absolute': 'absolute',
    'fixed': 'fixed',
    'sticky': 'sticky',
}

WIDTH_CLASSES = {
    'auto': 'w-auto',
    '100%': 'w-full',
    '50%': 'w-1/2',
    '33.333333%': 'w-1/3',
    '25%': 'w-1/4',
}

HEIGHT_CLASSES = {
    'auto': 'h-auto',
    '100%': 'h-full',
    '100vh': 'h-screen',
}

BORDER_WIDTH_CLASSES = {
    '0px': 'border-0',
    '1px': 'border',
    '2px': 'border-2',
    '4px': 'border-4',
    '8px': 'border-8',
}

# solid is the browser default and emits nothing
BORDER_STYLE_CLASSES = {
    'none': 'border-none',
    'dashed': 'border-dashed',
    'dotted': 'border-dotted',
    'double': 'border-double',
}

BORDER_RADIUS_CLASSES = {
    '0px': 'rounded-none',
    '2px': 'rounded-sm',
    '4px': 'rounded',
    '6px': 'rounded-md',
    '8px': 'rounded-lg',
    '12px': 'rounded-xl',
    '16px': 'rounded-2xl',
    '24px': 'rounded-3xl',
    '9999px': 'rounded-full',
}

FLEX_DIRECTION_CLASSES = {
    'row': 'flex-row',
    'column': 'flex-col',
    'row-reverse': 'flex-row-reverse',
    'column-reverse': 'flex-col-reverse',
}

JUSTIFY_CONTENT_CLASSES = {
    'flex-start': 'justify-start',
    'flex-end': 'justify-end',
    'center': 'justify-center',
    'space-between': 'justify-between',
    'space-around': 'justify-around',
    'space-evenly': 'justify-evenly',
}

ALIGN_ITEMS_CLASSES = {
    'flex-start': 'items-start',
    'flex-end': 'items-end',
    'center': 'items-center',
    'stretch': 'items-stretch',
    'baseline': 'items-baseline',
}

FONT_SIZE_CLASSES = {
    '12px': 'text-xs',
    '14px': 'text-sm',
    '16px': 'text-base',
    '18px': 'text-lg',
    '20px': 'text-xl',
    '24px': 'text-2xl',
    '30px': 'text-3xl',
    '36px': 'text-4xl',
    '48px': 'text-5xl',
}

FONT_WEIGHT_CLASSES = {
    '100': 'font-thin',
    '200': 'font-extralight',
    '300': 'font-light',
    '400': 'font-normal',
    'normal': 'font-normal',
    '500': 'font-medium',
    '600': 'font-semibold',
    '700': 'font-bold',
    'bold': 'font-bold',
    '800': 'font-extrabold',
    '900': 'font-black',
}

TEXT_ALIGN_CLASSES = {
    'left': 'text-left',
    'center': 'text-center',
    'right': 'text-right',
    'justify': 'text-justify',
}

# Per-side suffixes, in emission order
SIDES = ('top', 'right', 'bottom', 'left')
SIDE_PREFIXES = {'top': 't', 'right': 'r', 'bottom': 'b', 'left': 'l'}

# Per-corner radius properties, in emission order
CORNERS = ('top_left', 'top_right', 'bottom_right', 'bottom_left')
CORNER_PREFIXES = {
    'top_left': 'tl',
    'top_right': 'tr',
    'bottom_right': 'br',
    'bottom_left': 'bl',
}

# Styles given to every newly created element
DEFAULT_ELEMENT_STYLES = {
    'display': 'block',
    'position': 'relative',
    'padding': '16px',
    'background_color': '#ffffff',
}

# Tags that receive placeholder text on creation
TEXT_TAGS = ('button', 'p', 'span')
DEFAULT_TEXT_CONTENT = 'Text content'

INDENT_UNIT = '  '
