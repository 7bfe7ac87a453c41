"""GLSL sources of the normal mapping shader."""

_GLSL_VERSION = "#version 330 core"

_ATTRIBUTES = [
    ("vec3", "aPos"),
    ("vec3", "aNormal"),
    ("vec2", "aTexCoords"),
    ("vec3", "aTangent"),
    ("vec3", "aBitangent"),
]

_VARYINGS = [
    ("vec3", "FragPos"),
    ("vec2", "TexCoords"),
    ("vec3", "TangentLightPos"),
    ("vec3", "TangentViewPos"),
    ("vec3", "TangentFragPos"),
]

_VS_UNIFORMS = [
    ("mat4", "projection"),
    ("mat4", "view"),
    ("mat4", "model"),
    ("vec3", "lightPos"),
    ("vec3", "viewPos"),
]

_FS_UNIFORMS = [
    ("sampler2D", "diffuseMap"),
    ("sampler2D", "normalMap"),
    ("vec3", "lightPos"),
    ("vec3", "viewPos"),
]

VS_MAIN = """
void main()
{
    vec4 worldPos = model * vec4(aPos, 1.0);
    vs_out.FragPos = worldPos.xyz;
    vs_out.TexCoords = aTexCoords;

    mat3 normalMatrix = transpose(inverse(mat3(model)));
    vec3 n = normalize(normalMatrix * aNormal);
    vec3 t = normalize(normalMatrix * aTangent);
    t = normalize(t - n * dot(t, n));
    vec3 b = cross(n, t);
    mat3 toTangent = transpose(mat3(t, b, n));

    vs_out.TangentLightPos = toTangent * lightPos;
    vs_out.TangentViewPos = toTangent * viewPos;
    vs_out.TangentFragPos = toTangent * vs_out.FragPos;
    gl_Position = projection * view * worldPos;
}
"""

FS_MAIN = """
void main()
{
    vec3 n = normalize(texture(normalMap, fs_in.TexCoords).rgb * 2.0 - 1.0);
    vec3 albedo = texture(diffuseMap, fs_in.TexCoords).rgb;

    vec3 toLight = normalize(fs_in.TangentLightPos - fs_in.TangentFragPos);
    vec3 toView = normalize(fs_in.TangentViewPos - fs_in.TangentFragPos);
    vec3 halfway = normalize(toLight + toView);

    float lambert = max(dot(toLight, n), 0.0);
    float highlight = pow(max(dot(n, halfway), 0.0), 32.0);

    vec3 rgb = 0.1 * albedo + lambert * albedo + vec3(0.2) * highlight;
    FragColor = vec4(rgb, 1.0);
}
"""


def _declarations(qualifier: str, variables: list[tuple[str, str]]) -> list[str]:
    return [f"{qualifier} {type_name} {name};" for type_name, name in variables]


def _interface_block(qualifier: str, instance: str) -> list[str]:
    members = [f"    {type_name} {name};" for type_name, name in _VARYINGS]
    return [f"{qualifier} VS_OUT {{", *members, f"}} {instance};"]


def _vertex_shader() -> str:
    lines = [_GLSL_VERSION]
    lines += [
        f"layout (location = {location}) in {type_name} {name};"
        for location, (type_name, name) in enumerate(_ATTRIBUTES)
    ]
    lines += ["", *_interface_block("out", "vs_out"), ""]
    lines += _declarations("uniform", _VS_UNIFORMS)
    return "\n".join(lines) + "\n" + VS_MAIN


def _fragment_shader() -> str:
    lines = [_GLSL_VERSION, "out vec4 FragColor;", ""]
    lines += [*_interface_block("in", "fs_in"), ""]
    lines += _declarations("uniform", _FS_UNIFORMS)
    return "\n".join(lines) + "\n" + FS_MAIN


NORMAL_MAPPING_VS = _vertex_shader()
NORMAL_MAPPING_FS = _fragment_shader()