# apps/checklists/defaults.py
# Startowe check-listy tworzone dla każdego nowego użytkownika: (tytuł, kategoria, zadania)

DEFAULT_CHECKLISTS = [
    # Ogólne (bez kategorii)
    ('После открытия ООО/ИП', None, [
        'Открыть расчётный счёт в банке',
        'Заказать печать и штамп организации',
        'Уведомить фонд об открытии юр. лица',
        'Получить коды статистики (Росстат)',
        'Зарегистрироваться в ФСС и ПФР',
    ]),
    ('Запуск проекта', None, [
        'Составить детальный бизнес-план',
        'Определить ключевые метрики успеха',
        'Создать MVP продукта',
        'Провести первичное тестирование',
        'Подготовить презентацию для инвесторов',
    ]),

    # Kadry (HR)
    ('Приём нового сотрудника', 'HR', [
        'Получить документы от кандидата',
        'Составить трудовой договор',
        'Издать приказ о приёме на работу',
        'Внести запись в трудовую книжку',
        'Оформить личную карточку Т-2',
        'Провести инструктаж по охране труда',
    ]),
    ('Увольнение сотрудника', 'HR', [
        'Получить заявление об увольнении',
        'Издать приказ об увольнении',
        'Внести запись в трудовую книжку',
        'Произвести окончательный расчёт',
        'Выдать справки (2-НДФЛ, 182н)',
    ]),
    ('Воинский учёт', 'HR', [
        'Назначить ответственного за воинский учёт',
        'Завести карточки учёта на сотрудников',
        'Уведомить военкомат о приёме/увольнении',
        'Провести сверку данных с военкоматом',
    ]),

    # Finanse (FINANCE)
    ('Ежемесячная отчётность', 'FINANCE', [
        'Собрать первичные документы за месяц',
        'Сверить остатки по расчётному счёту',
        'Подготовить отчёт о расходах для фонда',
        'Рассчитать и уплатить налоги',
        'Выплатить заработную плату сотрудникам',
    ]),
    ('Квартальная отчётность', 'FINANCE', [
        'Подготовить декларацию по УСН/ОСНО',
        'Сдать отчёт в ФСС (4-ФСС)',
        'Сдать отчёт в ПФР (СЗВ-М, СЗВ-СТАЖ)',
        'Подготовить финансовый отчёт для гранта',
        'Провести инвентаризацию расходов',
    ]),
    ('При заключении договора', 'FINANCE', [
        'Проверить контрагента (выписка ЕГРЮЛ)',
        'Подготовить и согласовать договор',
        'Получить подписи сторон',
        'Выставить/получить счёт на оплату',
        'Составить акт выполненных работ',
        'Сохранить документы в архив',
    ]),
]
