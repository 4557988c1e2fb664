"""Axis-aligned box collision between game objects."""


def check_collision(obj1, obj2) -> bool:
    """Return True if the two objects' boxes overlap (touching edges do not)."""
    if obj1.pos_x + obj1.width <= obj2.pos_x:
        return False
    if obj1.pos_x >= obj2.pos_x + obj2.width:
        return False
    if obj1.pos_y + obj1.height <= obj2.pos_y:
        return False
    if obj1.pos_y >= obj2.pos_y + obj2.height:
        return False
    return True


def handle_collision(obj1, obj2, delta_time: int) -> bool:
    """Notify both objects if they overlap; return whether they did."""
    if not check_collision(obj1, obj2):
        return False
    obj1.on_collision(obj2, delta_time)
    obj2.on_collision(obj1, delta_time)
    return True