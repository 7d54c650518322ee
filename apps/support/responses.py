# apps/support/responses.py
# Automatyczne odpowiedzi: pierwsze dopasowane słowo kluczowe wygrywa (kolejność ma znaczenie)

AUTO_RESPONSES = [
    (('грант', 'финансирование', 'деньги', 'средства', 'фонд'),
     'По вопросам грантового финансирования рекомендуем обратиться к вашему куратору в фонде. '
     'В разделе "Финансы" вы можете отслеживать поступления и расходы по грантам.'),
    (('отчёт', 'отчет', 'отчётность', 'отчетность'),
     'Для подготовки отчётности используйте шаблоны в разделе "Документы". '
     'Все финансовые данные для отчёта доступны в разделе "Финансы" → "Отчёты".'),
    (('сотрудник', 'кадры', 'приём', 'прием', 'увольнение', 'трудовой', 'найм'),
     'Все кадровые вопросы можно решить в разделе "Кадры". Там вы можете добавлять сотрудников, '
     'оформлять приём и увольнение, вести трудовые договоры.'),
    (('налог', 'ндфл', 'усн', 'взнос', 'пфр', 'фсс'),
     'Налоговые вопросы отслеживайте через раздел "Финансы" → "Налоги". '
     'Система автоматически рассчитывает налоговую нагрузку и напомнит о сроках уплаты.'),
    (('документ', 'шаблон', 'договор', 'акт', 'счёт', 'счет'),
     'Все необходимые шаблоны документов доступны в разделе "Документы". '
     'Вы можете создавать договоры, акты, счета и другие документы на основе готовых шаблонов.'),
    (('календарь', 'напоминание', 'событие', 'дедлайн'),
     'В разделе "Календарь" вы можете создавать события и напоминания о важных датах: '
     'сроках отчётности, налоговых платежах, встречах с партнёрами.'),
    (('премиум', 'подписка', 'реклама', 'тариф'),
     'Премиум-подписка убирает рекламу и открывает дополнительные возможности: '
     'расширенную аналитику, приоритетную поддержку и дополнительные шаблоны документов.'),
    (('привет', 'здравствуй', 'добрый день', 'доброе утро', 'добрый вечер'),
     'Здравствуйте! Чем могу помочь? Задайте вопрос о работе платформы StartupHelper.'),
    (('спасибо', 'благодарю'),
     'Рады помочь! Если возникнут ещё вопросы — обращайтесь.'),
    (('аналитика', 'метрики', 'статистика', 'показатели'),
     'Аналитику и ключевые метрики вашего проекта вы найдёте в разделе "Аналитика". '
     'Там доступны графики роста, финансовые показатели и сравнительные данные.'),
    (('проект', 'задача', 'задание', 'план'),
     'Управление проектами и задачами доступно в разделе "Проекты". '
     'Вы можете создавать задачи, назначать исполнителей и отслеживать прогресс.'),
]

FALLBACK_RESPONSE = (
    'Спасибо за обращение! Ваш вопрос зарегистрирован. Специалист поддержки ответит вам '
    'в ближайшее время. Среднее время ответа — 2-4 часа в рабочие дни. '
    'Для быстрых ответов попробуйте нашего ИИ Помощника.'
)


def auto_response(message: str) -> str:
    lowered = message.lower()
    for keywords, response in AUTO_RESPONSES:
        if any(keyword in lowered for keyword in keywords):
            return response
    return FALLBACK_RESPONSE
