from fieldrules.models.course import Course, register_course_rules

__all__ = ["Course", "register_course_rules"]
