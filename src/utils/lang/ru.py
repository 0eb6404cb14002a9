"""Russian UI strings."""

STRINGS: dict[str, str] = {
    # Duration units
    "h": "ч",
    "m": "м",

    # Window
    "Time Distribution Slider": "Распределение времени",
    "Test settings": "Настройки тестирования",
    "Time distribution": "Распределение времени",
    "Distribution details": "Детали распределения",

    # Controls
    "Number of clients: {}": "Количество клиентов: {}",
    "Max. clients: {}": "Макс. клиентов: {}",
    "Total duration: {}": "Общая длительность: {}",
    "Min. share per client: {}": "Мин. доля на клиента: {}",
    "Allow pushing separators": "Разрешить проталкивание разделителей",
    "Distribute evenly": "Равномерно распределить",
    "Client {}": "Клиент {}",

    # Edit menu / undo
    "&Edit": "&Правка",
    "&Undo": "&Отменить",
    "&Redo": "&Повторить",
    "Change distribution": "Изменить распределение",

    # Status
    "Ready": "Готово",
    "Minimum share is too large for {} clients": "Минимальная доля слишком велика для {} клиентов",
}
