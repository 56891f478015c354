author_tag_description = "Авторы."

get_authors_description = (
    """
    **Получение листинга авторов.**<br>
    <br>
    Каждый элемент списка - строка вида **"Фамилия, Имя : год рождения - год смерти"**.<br>
    <br>
    **Сортировка (query-параметр):** имя поля и направление - **1** (по возрастанию)
    или **-1** (по убыванию), например **?family_name=-1**.<br>
    Поддерживаемые поля: **first_name**, **family_name**, **date_of_birth**, **date_of_death**.<br>
    Учитывается только одно поле. По умолчанию - по фамилии, по возрастанию.<br>
    <br>
    Если авторов нет, либо при выполнении запроса к БД произошла ошибка, возвращается
    текст **No authors found**.
    """
)

create_author_description = (
    """
    **Создание автора.**<br>
    <br>
    Имя и фамилия обязательны, длина от 1 до 100 символов.<br>
    Даты рождения и смерти необязательны, формат **YYYY-MM-DD**.<br>
    <br>
    При ошибке валидации возвращается код 422 и перечень всех некорректных полей.
    """
)
