DEFAULT_LANGUAGE = "en"

MESSAGES = {
    "en": {
        "prompt_pattern": "Enter the search string: ",
        "prompt_radius": "Enter the radius of visibility of the context: ",
        "match_found": 'A match was found: "{pattern}" in the position {position}',
        "context": "Context: {context}",
        "no_matches": "No matches were found.",
        "results_saved": "The results are saved in: {filename}",
        "execution_time": "Execution time of the Rabin-Karp algorithm: {seconds:.6f} seconds.",
        "input_read_error": "Error: couldn't open the file {filename}",
        "output_write_error": "Error: couldn't write to the file {filename}",
        "empty_pattern": "Error: The search string cannot be empty.",
        "non_printable_pattern": "Error: The search string must contain only valid ASCII characters.",
        "invalid_radius": "Error: The radius must be a non-negative integer.",
        "invalid_hash_parameters": "Error: The hash base and modulus must be positive integers.",
        "invalid_configuration": "Error: invalid configuration: {message}",
        "validation_error": "Error: invalid input.",
        "error": "Error: {message}",
    },
    "ru": {
        "prompt_pattern": "Введите строку для поиска: ",
        "prompt_radius": "Введите радиус видимости контекста: ",
        "match_found": 'Найдено совпадение: "{pattern}" в позиции {position}',
        "context": "Контекст: {context}",
        "no_matches": "Совпадений не найдено.",
        "results_saved": "Результаты сохранены в: {filename}",
        "execution_time": "Время выполнения алгоритма Рабина - Карпа: {seconds:.6f} секунд.",
        "input_read_error": "Ошибка: не удалось открыть файл {filename}",
        "output_write_error": "Ошибка: не удалось записать в файл {filename}",
        "empty_pattern": "Ошибка: строка поиска не может быть пустой.",
        "non_printable_pattern": "Ошибка: строка поиска должна содержать только допустимые символы ASCII.",
        "invalid_radius": "Ошибка: радиус должен быть неотрицательным целым числом.",
        "invalid_hash_parameters": "Ошибка: основание и модуль хеша должны быть положительными целыми числами.",
        "invalid_configuration": "Ошибка: некорректная конфигурация: {message}",
        "validation_error": "Ошибка: некорректный ввод.",
        "error": "Ошибка: {message}",
    },
}

LANGUAGES = tuple(MESSAGES)


def get_messages(language=DEFAULT_LANGUAGE):
    return MESSAGES.get((language or DEFAULT_LANGUAGE).lower(), MESSAGES[DEFAULT_LANGUAGE])


def message(key, language=DEFAULT_LANGUAGE, **kwargs):
    table = get_messages(language)
    template = table.get(key) or MESSAGES[DEFAULT_LANGUAGE][key]
    return template.format(**kwargs)


def error_message(error, language=DEFAULT_LANGUAGE):
    """Single-line user-facing text for a SearchError."""
    try:
        return message(error.key, language, message=str(error), **error.details)
    except (KeyError, IndexError):
        return message("error", language, message=str(error))
