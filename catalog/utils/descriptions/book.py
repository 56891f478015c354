book_tag_description = "Книги."

get_books_description = (
    """
    **Получение листинга книг.**<br>
    <br>
    Каждый элемент списка - строка вида **"Название : Фамилия, Имя"**.<br>
    <br>
    **Сортировка (query-параметр):** имя поля и направление - **1** или **-1**,
    например **?title=-1**. Поддерживаемые поля: **title**, **isbn**.<br>
    По умолчанию - по названию, по возрастанию.<br>
    <br>
    Если книг нет, либо при выполнении запроса к БД произошла ошибка, возвращается
    текст **No books found**.
    """
)

get_book_description = "**Получение сведений о книге.**"

create_book_description = (
    """
    **Создание книги.**<br>
    <br>
    Автор указывается по имени и фамилии и должен быть заранее создан.
    """
)
