from fieldrules.services.course_form import CourseFormHandler, FormResult

__all__ = ["CourseFormHandler", "FormResult"]
