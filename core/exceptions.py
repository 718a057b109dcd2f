from typing import List


class UserUpdateError(Exception):
    """Сохранение изменений профиля не удалось."""

    def __init__(self, user_id: int):
        self.user_id = user_id
        self.detail = f"Updating user {user_id} failed on save"
        super().__init__(self.detail)


class NavigationDenied(Exception):
    """Guard не пустил на защищённую страницу."""

    def __init__(self, location: str, messages: List[str]):
        self.location = location
        self.messages = messages
        super().__init__(f"Navigation denied, redirect to {location}")
