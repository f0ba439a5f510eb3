from pipette.core.color import Color
from pipette.core.options import AlphaPosition, ColorConfig, Illuminant, Observer


opaque_colors = [
    Color(255, 0, 0),
    Color(0, 255, 0),
    Color(0, 0, 255),
    Color(255, 255, 255),
    Color(0, 0, 0),
    Color(128, 128, 128),
    Color(255, 99, 71),
    Color(18, 52, 86),
    Color(200, 150, 30),
    Color(1, 2, 3),
    Color(250, 250, 5),
    Color(102, 51, 153),
]

translucent_colors = [
    Color(255, 99, 71, 128),
    Color(18, 52, 86, 0),
    Color(0, 0, 0, 64),
    Color(102, 51, 153, 254),
]

configs = [
    ColorConfig(),
    ColorConfig(illuminant=Illuminant.D50),
    ColorConfig(illuminant=Illuminant.A, observer=Observer.TEN_DEGREE),
    ColorConfig(illuminant=Illuminant.F11, observer=Observer.TEN_DEGREE, alpha_position=AlphaPosition.START),
    ColorConfig(alpha_position=AlphaPosition.NONE),
]

# text -> expected (r, g, b, a)
samples_hex = {
    "#FF0000": (255, 0, 0, 255),
    "#f00": (255, 0, 0, 255),
    "ff6347": (255, 99, 71, 255),
    "'#123456'": (18, 52, 86, 255),
    "#FF000080": (255, 0, 0, 128),
    "#F008": (255, 0, 0, 136),
}

samples_rgb = {
    "rgb(255, 0, 0)": (255, 0, 0, 255),
    "RGB(255,0,0)": (255, 0, 0, 255),
    "rgb(255 99 71)": (255, 99, 71, 255),
    "255, 99, 71": (255, 99, 71, 255),
    "(18, 52, 86)": (18, 52, 86, 255),
    "rgb(100%, 0%, 50%)": (255, 0, 128, 255),
    "rgba(255, 0, 0, 0.5)": (255, 0, 0, 128),
    "rgb(255 0 0 / 25%)": (255, 0, 0, 64),
    "  \"rgb(0, 0, 255)\"  ": (0, 0, 255, 255),
}

samples_hsl = {
    "hsl(0, 100%, 50%)": (255, 0, 0, 255),
    "hsl(120deg 100% 50%)": (0, 255, 0, 255),
    "hsl(0.5turn, 1, 0.5)": (0, 255, 255, 255),
    "hsl(240, 100, 50)": (0, 0, 255, 255),
    "hsla(0, 0%, 100%, 0.5)": (255, 255, 255, 128),
    "hsl(-120, 100%, 50%)": (0, 0, 255, 255),
    "hsl(400grad, 100%, 50%)": (255, 0, 0, 255),
}

samples_hsv = {
    "hsv(240, 100%, 100%)": (0, 0, 255, 255),
    "hsb(0, 0%, 100%)": (255, 255, 255, 255),
    "hsv(60°, 100%, 100%)": (255, 255, 0, 255),
}

samples_hwb = {
    "hwb(0, 0%, 0%)": (255, 0, 0, 255),
    "hwb(0 100% 0%)": (255, 255, 255, 255),
    "hwb(0, 0%, 100%)": (0, 0, 0, 255),
    "hwb(120, 60%, 60%)": (128, 128, 128, 255),
}

samples_cmyk = {
    "cmyk(0%, 100%, 100%, 0%)": (255, 0, 0, 255),
    "device-cmyk(0 0 0 1)": (0, 0, 0, 255),
    "cmyk(0, 0, 0, 0)": (255, 255, 255, 255),
}

samples_ciexyz = {
    "xyz(0, 0, 0)": (0, 0, 0, 255),
    "xyz(95.047, 100, 108.883)": (255, 255, 255, 255),
    "ciexyz(41.2456 21.2673 1.9334)": (255, 0, 0, 255),
}

samples_cielab = {
    "lab(0, 0, 0)": (0, 0, 0, 255),
    "lab(100, 0, 0)": (255, 255, 255, 255),
    "cielab(53.2408, 80.0925, 67.2032)": (255, 0, 0, 255),
}

samples_oklab = {
    "oklab(1, 0, 0)": (255, 255, 255, 255),
    "oklab(0%, 0, 0)": (0, 0, 0, 255),
    "oklab(0.627955, 0.224863, 0.125846)": (255, 0, 0, 255),
}

samples_oklch = {
    "oklch(1, 0, 0)": (255, 255, 255, 255),
    "oklch(0.627955, 0.257683, 29.2339)": (255, 0, 0, 255),
    "oklch(62.7955% 64.4208% 29.2339deg)": (255, 0, 0, 255),
}

malformed_inputs = {
    "rgb": ["rgb(255, 0, 0", "rgb(300, 0, 0)", "rgb(255, 0)", "rgb(1px, 0, 0)", "foo(1, 2, 3)", "", "rgb(-1, 0, 0)"],
    "hsl": ["hsl(0, 150%, 50%)", "hsl(0, 50%)", "hsl(0, 101, 50)", "hsl(0%, 50%, 50%)"],
    "cmyk": ["cmyk(0, 0, 0)", "cmyk(0, 0, 0, 0, 0)", "cmyk(0%, 0%, 0%, 120%)"],
    "xyz": ["xyz(-1, 0, 0)", "xyz(1, 2)"],
    "lab": ["lab(101, 0, 0)", "lab(-5, 0, 0)", "lab(50, 0, 0, 0)", "lab(50, 1e200, 0)", "lab(50, 0, -1e200)"],
    "lch": ["lch(50, 1e200, 0)", "lch(50, -1, 0)"],
    "oklab": ["oklab(1.5, 0, 0)", "oklab(0.5, 0, 0deg)", "oklab(0.5, 1e200, 0)", "oklab(0.5, 0, -1e200)"],
    "oklch": ["oklch(0.5, -0.1, 0)", "oklch(0.5, 1e200, 0)"],
}

# Large but accepted components, by notation
domain_edges = {
    "lab": ["lab(50, 500, -500)", "lab(50, 400%, -400%)"],
    "lch": ["lch(50, 500, 0)"],
    "oklab": ["oklab(0.5, 2, -2)", "oklab(0.5, 250%, -250%)"],
    "oklch": ["oklch(0.5, 2, 0)"],
}
