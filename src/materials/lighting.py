# materials/lighting.py
from core.vector import Point3, Vector3, BLACK
from core.utils import reflect
from materials.light import PointLight
from materials.material import Material

def lighting(material: Material, light: PointLight, point: Point3, eyev: Vector3,
             normalv: Vector3, in_shadow: bool = False, shape=None) -> Vector3:
    """
    Phong reflection model for a single point light.

    Args:
        material: Surface material.
        light: The light source.
        point: World-space point being lit.
        eyev: Unit vector towards the eye.
        normalv: Unit surface normal.
        in_shadow: Whether the light is occluded; only ambient remains.
        shape: Shape owning the surface, needed to evaluate patterns.

    Returns:
        Vector3: The local color at the point.
    """
    if shape is not None:
        surface = material.color_at_object(shape, point)
    else:
        surface = material.color
    effective_color = surface * light.intensity
    ambient = effective_color * material.ambient
    if in_shadow:
        return ambient

    light_v = (light.position - point).normalize()
    light_dot_normal = light_v.dot(normalv)
    if light_dot_normal < 0:
        # Light is on the other side of the surface.
        return ambient

    diffuse = effective_color * (material.diffuse * light_dot_normal)
    reflect_dot_eye = reflect(-light_v, normalv).dot(eyev)
    if reflect_dot_eye <= 0:
        specular = BLACK
    else:
        factor = reflect_dot_eye ** material.shininess
        specular = light.intensity * (material.specular * factor)
    return ambient + diffuse + specular
