"""
Доменные исключения EDM.

Сервисы бросают их синхронно вызывающему коду, HTTP-слой
(``app.api.errors``) переводит их в коды ответа.
"""


class EdmError(Exception):
    """Базовое исключение сервисного слоя"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ResourceNotFoundError(EdmError, LookupError):
    """Сущность с таким идентификатором не найдена. HTTP 404"""

    def __init__(self, resource: str, resource_id):
        super().__init__(f"{resource} with id {resource_id} not found")
        self.resource = resource
        self.resource_id = resource_id


class UserAlreadyExistsError(EdmError):
    """Нарушена уникальность login или email. HTTP 409"""


class InvalidCredentialsError(EdmError):
    """Старый пароль не совпал с сохраненным хешем. HTTP 401"""

    def __init__(self, message: str = "Old password is incorrect"):
        super().__init__(message)


class WrongDateError(EdmError):
    """Нарушена согласованность дат документа. HTTP 409"""


class ResourceInUseError(EdmError):
    """Сущность нельзя удалить, на нее ссылаются другие записи. HTTP 409"""

    def __init__(self, resource: str, resource_id):
        super().__init__(f"{resource} with id {resource_id} is still referenced and cannot be deleted")
        self.resource = resource
        self.resource_id = resource_id
