"""Response schema and default values for LLM WebGL generation."""


def _number_array(description: str) -> dict:
    return {
        "type": "ARRAY",
        "items": {"type": "NUMBER"},
        "description": description,
    }


RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "vertex_shader": {
            "type": "STRING",
            "description": "The vertex shader code in GLSL.",
        },
        "fragment_shader": {
            "type": "STRING",
            "description": "The fragment shader code in GLSL.",
        },
        "vertex_data": {
            "type": "OBJECT",
            "properties": {
                "positions": _number_array("Vertex positions as an array of numbers."),
                "indices": _number_array(
                    "Vertex indices as an array of numbers (optional)."
                ),
                "dimensionality": {
                    "type": "NUMBER",
                    "description": "Dimensionality of vertex positions (2 for 2D, 3 for 3D).",
                },
            },
            "required": ["positions"],
            "description": "Vertex data including positions and optional indices.",
        },
        "uniforms": {
            "type": "OBJECT",
            "properties": {
                "u_resolution": _number_array("Canvas resolution as [width, height]."),
                "u_time": {
                    "type": "NUMBER",
                    "description": "Time uniform for animations (optional).",
                },
                "u_color": _number_array("Default color as [r, g, b, a]."),
            },
            "required": ["u_resolution"],
            "description": "Uniforms required for the shaders.",
        },
        "attributes": {
            "type": "OBJECT",
            "properties": {
                "a_position": _number_array("Vertex position attribute."),
            },
            "required": ["a_position"],
            "description": "Attributes required for the shaders.",
        },
        "camera": {
            "type": "OBJECT",
            "properties": {
                "position": _number_array("Camera position as [x, y, z]."),
                "target": _number_array("Camera target as [x, y, z]."),
            },
        },
        "scene": {
            "type": "OBJECT",
            "properties": {
                "background_color": _number_array(
                    "Scene background color as [r, g, b, a]."
                ),
            },
        },
        "mesh": {
            "type": "OBJECT",
            "properties": {
                "scale": _number_array("Mesh scale as [x, y, z]."),
            },
        },
    },
    "required": [
        "vertex_shader",
        "fragment_shader",
        "vertex_data",
        "uniforms",
        "attributes",
    ],
    "description": "Structured WebGL code for rendering shapes or effects.",
}

GENERATION_CONFIG = {
    "response_mime_type": "application/json",
    "response_schema": RESPONSE_SCHEMA,
}

# Fallbacks merged under every answer; answer values win at each leaf.
DEFAULTS = {
    "uniforms": {
        "u_resolution": [500.0, 500.0],
        "u_time": 0.0,
        "u_color": [1.0, 0.0, 0.0, 1.0],
    },
    "camera": {
        "position": [0, 0, 5],
        "target": [0, 0, 0],
    },
    "scene": {
        "background_color": [0.1, 0.1, 0.1, 1.0],
    },
    "mesh": {
        "scale": [1, 1, 1],
    },
    "vertex_data": {
        "dimensionality": 2,
    },
}
