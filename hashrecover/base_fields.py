"""Names of the fields every entity inherits from the engine's base entity."""

DEFAULT_BASE_FIELDS: tuple[str, ...] = (
    "position",
    "scale",
    "velocity",
    "updateRange",
    "angle",
    "alpha",
    "rotation",
    "groundVel",
    "zdepth",
    "group",
    "classID",
    "inRange",
    "isPermanent",
    "tileCollisions",
    "interaction",
    "onGround",
    "active",
    "filter",
    "direction",
    "drawGroup",
    "collisionLayers",
    "collisionPlane",
    "collisionMode",
    "drawFX",
    "inkEffect",
    "visible",
    "onScreen",
)
