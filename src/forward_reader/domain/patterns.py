"""
Built-in pattern catalog definitions.

Each category maps to its regex flags (letters from "imsx") and an ordered
tuple of patterns. Order matters: on exact ties the earlier entry wins.
The same shape is accepted for override documents (see services.catalog).

Captures are always named, since group order varies between locales:
    value                         header / subject prefix remainder
    name, address                 mailbox
    date, from_name, from_address separator line carrying the author
"""

DEFAULT_DEFINITIONS = {
    # Normalization
    'line_break': {
        'flags': '',
        'patterns': (r'\r\n?',),
    },
    'byte_order_mark': {
        'flags': '',
        'patterns': (r'\ufeff',),  # Outlook 2019
    },
    'trailing_non_breaking_space': {
        'flags': 'm',
        'patterns': (r'\xa0$',),  # IONOS by 1 & 1
    },
    'non_breaking_space': {
        'flags': '',
        'patterns': (r'\xa0',),
    },

    # Quoting
    'quote_line_break': {
        'flags': 'm',
        'patterns': (r'^(>+)[^\S\n]?$',),  # Apple Mail, Missive
    },
    'quote': {
        'flags': 'm',
        'patterns': (r'^(>+)\s?',),  # Apple Mail
    },
    'four_spaces': {
        'flags': 'm',
        'patterns': (r'^( {4})\s?',),  # Outlook 2019
    },

    # Subject forward prefixes
    'subject': {
        'flags': 'm',
        'patterns': (
            r'^Fw:(?P<value>.*)', r'^VS:(?P<value>.*)', r'^WG:(?P<value>.*)',
            r'^RV:(?P<value>.*)', r'^TR:(?P<value>.*)', r'^I:(?P<value>.*)',
            r'^FW:(?P<value>.*)', r'^Vs:(?P<value>.*)', r'^PD:(?P<value>.*)',
            r'^ENC:(?P<value>.*)', r'^Redir.:(?P<value>.*)', r'^VB:(?P<value>.*)',
            r'^VL:(?P<value>.*)', r'^Videresend:(?P<value>.*)', r'^İLT:(?P<value>.*)',
            r'^Fwd:(?P<value>.*)',
        ),
    },

    # Forward boundary lines
    'separator': {
        'flags': 'm',
        'patterns': (
            r'^>?\s*Begin forwarded message\s?:',  # Apple Mail (en)
            r'^>?\s*Začátek přeposílané zprávy\s?:',  # Apple Mail (cs)
            r'^>?\s*Start på videresendt besked\s?:',  # Apple Mail (da)
            r'^>?\s*Anfang der weitergeleiteten Nachricht\s?:',  # Apple Mail (de)
            r'^>?\s*Inicio del mensaje reenviado\s?:',  # Apple Mail (es)
            r'^>?\s*Välitetty viesti alkaa\s?:',  # Apple Mail (fi)
            r'^>?\s*Début du message réexpédié\s?:',  # Apple Mail (fr)
            r'^>?\s*Début du message transféré\s?:',  # Apple Mail iOS (fr)
            r'^>?\s*Započni proslijeđenu poruku\s?:',  # Apple Mail (hr)
            r'^>?\s*Továbbított levél kezdete\s?:',  # Apple Mail (hu)
            r'^>?\s*Inizio messaggio inoltrato\s?:',  # Apple Mail (it)
            r'^>?\s*Begin doorgestuurd bericht\s?:',  # Apple Mail (nl)
            r'^>?\s*Videresendt melding\s?:',  # Apple Mail (no)
            r'^>?\s*Początek przekazywanej wiadomości\s?:',  # Apple Mail (pl)
            r'^>?\s*Início da mensagem reencaminhada\s?:',  # Apple Mail (pt)
            r'^>?\s*Início da mensagem encaminhada\s?:',  # Apple Mail (pt-br)
            r'^>?\s*Începe mesajul redirecționat\s?:',  # Apple Mail (ro)
            r'^>?\s*Начало переадресованного сообщения\s?:',  # Apple Mail (ru)
            r'^>?\s*Začiatok preposlanej správy\s?:',  # Apple Mail (sk)
            r'^>?\s*Vidarebefordrat mejl\s?:',  # Apple Mail (sv)
            r'^>?\s*İleti başlangıcı\s?:',  # Apple Mail (tr)
            r'^>?\s*Початок листа, що пересилається\s?:',  # Apple Mail (uk)
            r'^\s*-{8,10}\s*Forwarded message\s*-{8,10}\s*',  # Gmail (all locales), Missive, HubSpot (en)
            r'^\s*_{32}\s*$',  # Outlook Live / 365 (all locales)
            r'^\s?Forwarded message:',  # Mailmate
            r'^\s?Dne\s?.+,\s?.+\s*[\[|<].+[\]|>]\s?napsal\(a\)\s?:',  # Outlook 2019 (cz)
            r'^\s?D.\s?.+\s?skrev\s?".+"\s*[\[|<].+[\]|>]\s?:',  # Outlook 2019 (da)
            r'^\s?Am\s?.+\s?schrieb\s?".+"\s*[\[|<].+[\]|>]\s?:',  # Outlook 2019 (de)
            r'^\s?On\s?.+,\s?".+"\s*[\[|<].+[\]|>]\s?wrote\s?:',  # Outlook 2019 (en)
            r'^\s?El\s?.+,\s?".+"\s*[\[|<].+[\]|>]\s?escribió\s?:',  # Outlook 2019 (es)
            r'^\s?Le\s?.+,\s?«.+»\s*[\[|<].+[\]|>]\s?a écrit\s?:',  # Outlook 2019 (fr)
            r'^\s?.+\s*[\[|<].+[\]|>]\s?kirjoitti\s?.+\s?:',  # Outlook 2019 (fi)
            r'^\s?.+\s?időpontban\s?.+\s*[\[|<|(].+[\]|>|)]\s?ezt írta\s?:',  # Outlook 2019 (hu)
            r'^\s?Il giorno\s?.+\s?".+"\s*[\[|<].+[\]|>]\s?ha scritto\s?:',  # Outlook 2019 (it)
            r'^\s?Op\s?.+\s?heeft\s?.+\s*[\[|<].+[\]|>]\s?geschreven\s?:',  # Outlook 2019 (nl)
            r'^\s?.+\s*[\[|<].+[\]|>]\s?skrev følgende den\s?.+\s?:',  # Outlook 2019 (no)
            r'^\s?Dnia\s?.+\s?„.+”\s*[\[|<].+[\]|>]\s?napisał\s?:',  # Outlook 2019 (pl)
            r'^\s?Em\s?.+,\s?".+"\s*[\[|<].+[\]|>]\s?escreveu\s?:',  # Outlook 2019 (pt)
            r'^\s?.+\s?пользователь\s?".+"\s*[\[|<].+[\]|>]\s?написал\s?:',  # Outlook 2019 (ru)
            r'^\s?.+\s?používateľ\s?.+\s*\([\[|<].+[\]|>]\)\s?napísal\s?:',  # Outlook 2019 (sk)
            r'^\s?Den\s?.+\s?skrev\s?".+"\s*[\[|<].+[\]|>]\s?följande\s?:',  # Outlook 2019 (sv)
            r'^\s?".+"\s*[\[|<].+[\]|>],\s?.+\s?tarihinde şunu yazdı\s?:',  # Outlook 2019 (tr)
            r'^\s*-{5,8} Přeposlaná zpráva -{5,8}\s*',  # Yahoo Mail (cs), Thunderbird (cs)
            r'^\s*-{5,8} Videresendt meddelelse -{5,8}\s*',  # Yahoo Mail (da), Thunderbird (da)
            r'^\s*-{5,10} Weitergeleitete Nachricht -{5,10}\s*',  # Yahoo Mail (de), Thunderbird (de), HubSpot (de)
            r'^\s*-{3,8} Forwarded Message -{3,8}\s*',  # Yahoo Mail (en), Thunderbird (en)
            r'^\s*-{5,10} Mensaje reenviado -{5,10}\s*',  # Yahoo Mail (es), Thunderbird (es), HubSpot (es)
            r'^\s*-{5,10} Edelleenlähetetty viesti -{5,10}\s*',  # Yahoo Mail (fi), HubSpot (fi)
            r'^\s*-{5} Message transmis -{5}\s*',  # Yahoo Mail (fr)
            r'^\s*-{5,8} Továbbított üzenet -{5,8}\s*',  # Yahoo Mail (hu), Thunderbird (hu)
            r'^\s*-{5,10} Messaggio inoltrato -{5,10}\s*',  # Yahoo Mail (it), HubSpot (it)
            r'^\s*-{5,10} Doorgestuurd bericht -{5,10}\s*',  # Yahoo Mail (nl), Thunderbird (nl), HubSpot (nl)
            r'^\s*-{5,8} Videresendt melding -{5,8}\s*',  # Yahoo Mail (no), Thunderbird (no)
            r'^\s*-{5} Przekazana wiadomość -{5}\s*',  # Yahoo Mail (pl)
            r'^\s*-{5,8} Mensagem reencaminhada -{5,8}\s*',  # Yahoo Mail (pt), Thunderbird (pt)
            r'^\s*-{5,10} Mensagem encaminhada -{5,10}\s*',  # Yahoo Mail (pt-br), Thunderbird (pt-br), HubSpot (pt-br)
            r'^\s*-{5,8} Mesaj redirecționat -{5,8}\s*',  # Yahoo Mail (ro)
            r'^\s*-{5} Пересылаемое сообщение -{5}\s*',  # Yahoo Mail (ru)
            r'^\s*-{5} Preposlaná správa -{5}\s*',  # Yahoo Mail (sk)
            r'^\s*-{5,10} Vidarebefordrat meddelande -{5,10}\s*',  # Yahoo Mail (sv), Thunderbird (sv), HubSpot (sv)
            r'^\s*-{5} İletilmiş Mesaj -{5}\s*',  # Yahoo Mail (tr)
            r'^\s*-{5} Перенаправлене повідомлення -{5}\s*',  # Yahoo Mail (uk)
            r'^\s*-{8} Välitetty viesti / Fwd.Msg -{8}\s*',  # Thunderbird (fi)
            r'^\s*-{8,10} Message transféré -{8,10}\s*',  # Thunderbird (fr), HubSpot (fr)
            r'^\s*-{8} Proslijeđena poruka -{8}\s*',  # Thunderbird (hr)
            r'^\s*-{8} Messaggio Inoltrato -{8}\s*',  # Thunderbird (it)
            r'^\s*-{3} Treść przekazanej wiadomości -{3}\s*',  # Thunderbird (pl)
            r'^\s*-{8} Перенаправленное сообщение -{8}\s*',  # Thunderbird (ru)
            r'^\s*-{8} Preposlaná správa --- Forwarded Message -{8}\s*',  # Thunderbird (sk)
            r'^\s*-{8} İletilen İleti -{8}\s*',  # Thunderbird (tr)
            r'^\s*-{8} Переслане повідомлення -{8}\s*',  # Thunderbird (uk)
            r'^\s*-{9,10} メッセージを転送 -{9,10}\s*',  # HubSpot (ja)
            r'^\s*-{9,10} Wiadomość przesłana dalej -{9,10}\s*',  # HubSpot (pl)
            r'^>?\s*-{10} Original Message -{10}\s*',  # IONOS by 1 & 1 (en)
        ),
    },

    # Boundary lines that also carry the author and date (Outlook 2019)
    'separator_with_information': {
        'flags': 'm',
        'patterns': (
            r'^\s?Dne\s?(?P<date>.+),\s?(?P<from_name>.+)\s*[\[|<](?P<from_address>.+)[\]|>]\s?napsal\(a\)\s?:',
            r'^\s?D.\s?(?P<date>.+)\s?skrev\s?"(?P<from_name>.+)"\s*[\[|<](?P<from_address>.+)[\]|>]\s?:',
            r'^\s?Am\s?(?P<date>.+)\s?schrieb\s?"(?P<from_name>.+)"\s*[\[|<](?P<from_address>.+)[\]|>]\s?:',
            r'^\s?On\s?(?P<date>.+),\s?"(?P<from_name>.+)"\s*[\[|<](?P<from_address>.+)[\]|>]\s?wrote\s?:',
            r'^\s?El\s?(?P<date>.+),\s?"(?P<from_name>.+)"\s*[\[|<](?P<from_address>.+)[\]|>]\s?escribió\s?:',
            r'^\s?Le\s?(?P<date>.+),\s?«(?P<from_name>.+)»\s*[\[|<](?P<from_address>.+)[\]|>]\s?a écrit\s?:',
            r'^\s?(?P<from_name>.+)\s*[\[|<](?P<from_address>.+)[\]|>]\s?kirjoitti\s?(?P<date>.+)\s?:',
            r'^\s?(?P<date>.+)\s?időpontban\s?(?P<from_name>.+)\s*[\[|<|(](?P<from_address>.+)[\]|>|)]\s?ezt írta\s?:',
            r'^\s?Il giorno\s?(?P<date>.+)\s?"(?P<from_name>.+)"\s*[\[|<](?P<from_address>.+)[\]|>]\s?ha scritto\s?:',
            r'^\s?Op\s?(?P<date>.+)\s?heeft\s?(?P<from_name>.+)\s*[\[|<](?P<from_address>.+)[\]|>]\s?geschreven\s?:',
            r'^\s?(?P<from_name>.+)\s*[\[|<](?P<from_address>.+)[\]|>]\s?skrev følgende den\s?(?P<date>.+)\s?:',
            r'^\s?Dnia\s?(?P<date>.+)\s?„(?P<from_name>.+)”\s*[\[|<](?P<from_address>.+)[\]|>]\s?napisał\s?:',
            r'^\s?Em\s?(?P<date>.+),\s?"(?P<from_name>.+)"\s*[\[|<](?P<from_address>.+)[\]|>]\s?escreveu\s?:',
            r'^\s?(?P<date>.+)\s?пользователь\s?"(?P<from_name>.+)"\s*[\[|<](?P<from_address>.+)[\]|>]\s?написал\s?:',
            r'^\s?(?P<date>.+)\s?používateľ\s?(?P<from_name>.+)\s*\([\[|<](?P<from_address>.+)[\]|>]\)\s?napísal\s?:',
            r'^\s?Den\s?(?P<date>.+)\s?skrev\s?"(?P<from_name>.+)"\s*[\[|<](?P<from_address>.+)[\]|>]\s?följande\s?:',
            r'^\s?"(?P<from_name>.+)"\s*[\[|<](?P<from_address>.+)[\]|>],\s?(?P<date>.+)\s?tarihinde şunu yazdı\s?:',
        ),
    },

    # Header labels
    'original_subject': {
        'flags': 'im',
        'patterns': (
            r'^\*?Subject\s?:\*?(?P<value>.+)', r'^Předmět\s?:(?P<value>.+)', r'^Emne\s?:(?P<value>.+)',
            r'^Betreff\s?:(?P<value>.+)', r'^Asunto\s?:(?P<value>.+)', r'^Aihe\s?:(?P<value>.+)',
            r'^Objet\s?:(?P<value>.+)', r'^Predmet\s?:(?P<value>.+)', r'^Tárgy\s?:(?P<value>.+)',
            r'^Oggetto\s?:(?P<value>.+)', r'^Onderwerp\s?:(?P<value>.+)', r'^Temat\s?:(?P<value>.+)',
            r'^Assunto\s?:(?P<value>.+)', r'^Subiectul\s?:(?P<value>.+)', r'^Тема\s?:(?P<value>.+)',
            r'^Ämne\s?:(?P<value>.+)', r'^Konu\s?:(?P<value>.+)', r'^Sujet\s?:(?P<value>.+)',
            r'^Naslov\s?:(?P<value>.+)', r'^件名：(?P<value>.+)',
        ),
    },
    'original_subject_lax': {
        'flags': 'i',
        'patterns': (
            r'Subject\s?:(?P<value>.+)', r'Emne\s?:(?P<value>.+)', r'Předmět\s?:(?P<value>.+)',
            r'Betreff\s?:(?P<value>.+)', r'Asunto\s?:(?P<value>.+)', r'Aihe\s?:(?P<value>.+)',
            r'Objet\s?:(?P<value>.+)', r'Tárgy\s?:(?P<value>.+)', r'Oggetto\s?:(?P<value>.+)',
            r'Onderwerp\s?:(?P<value>.+)', r'Assunto\s?:?(?P<value>.+)', r'Temat\s?:(?P<value>.+)',
            r'Subiect\s?:(?P<value>.+)', r'Тема\s?:(?P<value>.+)', r'Predmet\s?:(?P<value>.+)',
            r'Ämne\s?:(?P<value>.+)', r'Konu\s?:(?P<value>.+)',
        ),
    },
    'original_from': {
        'flags': 'm',
        'patterns': (
            r'^\*?\s*From\s?:\*?(?P<value>.+)$', r'^\s*Od\s?:(?P<value>.+)$', r'^\s*Fra\s?:(?P<value>.+)$',
            r'^\s*Von\s?:(?P<value>.+)$', r'^\s*De\s?:(?P<value>.+)$', r'^\s*Lähettäjä\s?:(?P<value>.+)$',
            r'^\s*Šalje\s?:(?P<value>.+)$', r'^\s*Feladó\s?:(?P<value>.+)$', r'^\s*Da\s?:(?P<value>.+)$',
            r'^\s*Van\s?:(?P<value>.+)$', r'^\s*Expeditorul\s?:(?P<value>.+)$', r'^\s*Отправитель\s?:(?P<value>.+)$',
            r'^\s*Från\s?:(?P<value>.+)$', r'^\s*Kimden\s?:(?P<value>.+)$', r'^\s*Від кого\s?:(?P<value>.+)$',
            r'^\s*Saatja\s?:(?P<value>.+)$', r'^\s*De la\s?:(?P<value>.+)$', r'^\s*Gönderen\s?:(?P<value>.+)$',
            r'^\s*От\s?:(?P<value>.+)$', r'^\s*Від\s?:(?P<value>.+)$', r'^\s*Mittente\s?:(?P<value>.+)$',
            r'^\s*Nadawca\s?:(?P<value>.+)$', r'^\s*de la\s?:(?P<value>.+)$', r'^\s*送信元：(?P<value>.+)$',
        ),
    },
    'original_from_lax': {
        'flags': '',
        'patterns': tuple(
            r'\s*' + label + r'\s?:(?P<from_name>.+?)\s?\n?\s*[\[|<](?P<from_address>.+?)[\]|>]'
            for label in (
                'From', 'Od', 'Fra', 'Von', 'De', 'Lähettäjä', 'Feladó', 'Da',
                'Van', 'De la', 'От', 'Från', 'Kimden', 'Від',
            )
        ),
    },
    'original_to': {
        'flags': 'm',
        'patterns': (
            r'^\*?\s*To\s?:\*?(?P<value>.+)$', r'^\s*Komu\s?:(?P<value>.+)$', r'^\s*Til\s?:(?P<value>.+)$',
            r'^\s*An\s?:(?P<value>.+)$', r'^\s*Para\s?:(?P<value>.+)$', r'^\s*Vastaanottaja\s?:(?P<value>.+)$',
            r'^\s*À\s?:(?P<value>.+)$', r'^\s*Prima\s?:(?P<value>.+)$', r'^\s*Címzett\s?:(?P<value>.+)$',
            r'^\s*A\s?:(?P<value>.+)$', r'^\s*Aan\s?:(?P<value>.+)$', r'^\s*Do\s?:(?P<value>.+)$',
            r'^\s*Destinatarul\s?:(?P<value>.+)$', r'^\s*Кому\s?:(?P<value>.+)$', r'^\s*Pre\s?:(?P<value>.+)$',
            r'^\s*Till\s?:(?P<value>.+)$', r'^\s*Kime\s?:(?P<value>.+)$', r'^\s*Pour\s?:(?P<value>.+)$',
            r'^\s*Adresat\s?:(?P<value>.+)$', r'^\s*送信先：(?P<value>.+)$',
        ),
    },
    'original_to_lax': {
        'flags': 'm',
        'patterns': (
            r'\s*To\s?:(?P<value>.+)$', r'\s*Komu\s?:(?P<value>.+)$', r'\s*Til\s?:(?P<value>.+)$',
            r'\s*An\s?:(?P<value>.+)$', r'\s*Para\s?:(?P<value>.+)$', r'\s*Vastaanottaja\s?:(?P<value>.+)$',
            r'\s*À\s?:(?P<value>.+)$', r'\s*Címzett\s?:(?P<value>.+)$', r'\s*A\s?:(?P<value>.+)$',
            r'\s*Aan\s?:(?P<value>.+)$', r'\s*Do\s?:(?P<value>.+)$', r'\s*Către\s?:(?P<value>.+)$',
            r'\s*Кому\s?:(?P<value>.+)$', r'\s*Till\s?:(?P<value>.+)$', r'\s*Kime\s?:(?P<value>.+)$',
        ),
    },
    'original_reply_to': {
        'flags': 'm',
        'patterns': (
            r'^\s*Reply-To\s?:(?P<value>.+)$', r'^\s*Odgovori na\s?:(?P<value>.+)$',
            r'^\s*Odpověď na\s?:(?P<value>.+)$', r'^\s*Svar til\s?:(?P<value>.+)$',
            r'^\s*Antwoord aan\s?:(?P<value>.+)$', r'^\s*Vastaus\s?:(?P<value>.+)$',
            r'^\s*Répondre à\s?:(?P<value>.+)$', r'^\s*Antwort an\s?:(?P<value>.+)$',
            r'^\s*Válaszcím\s?:(?P<value>.+)$', r'^\s*Rispondi a\s?:(?P<value>.+)$',
            r'^\s*Odpowiedź-do\s?:(?P<value>.+)$', r'^\s*Responder A\s?:(?P<value>.+)$',
            r'^\s*Responder a\s?:(?P<value>.+)$', r'^\s*Răspuns către\s?:(?P<value>.+)$',
            r'^\s*Ответ-Кому\s?:(?P<value>.+)$', r'^\s*Odpovedať-Pre\s?:(?P<value>.+)$',
            r'^\s*Svara till\s?:(?P<value>.+)$', r'^\s*Yanıt Adresi\s?:(?P<value>.+)$',
            r'^\s*Кому відповісти\s?:(?P<value>.+)$',
        ),
    },
    'original_cc': {
        'flags': 'm',
        'patterns': (
            r'^\*?\s*Cc\s?:\*?(?P<value>.+)$', r'^\s*CC\s?:(?P<value>.+)$', r'^\s*Kopie\s?:(?P<value>.+)$',
            r'^\s*Kopio\s?:(?P<value>.+)$', r'^\s*Másolat\s?:(?P<value>.+)$', r'^\s*Kopi\s?:(?P<value>.+)$',
            r'^\s*Dw\s?:(?P<value>.+)$', r'^\s*Копия\s?:(?P<value>.+)$', r'^\s*Kopia\s?:(?P<value>.+)$',
            r'^\s*Bilgi\s?:(?P<value>.+)$', r'^\s*Копія\s?:(?P<value>.+)$', r'^\s*Másolatot kap\s?:(?P<value>.+)$',
            r'^\s*Kópia\s?:(?P<value>.+)$', r'^\s*DW\s?:(?P<value>.+)$', r'^\s*Kopie \(CC\)\s?:(?P<value>.+)$',
            r'^\s*Copie à\s?:(?P<value>.+)$', r'^\s*CC：(?P<value>.+)$',
        ),
    },
    'original_cc_lax': {
        'flags': 'm',
        'patterns': (
            r'\s*Cc\s?:(?P<value>.+)$', r'\s*CC\s?:(?P<value>.+)$', r'\s*Kopie\s?:(?P<value>.+)$',
            r'\s*Kopio\s?:(?P<value>.+)$', r'\s*Másolat\s?:(?P<value>.+)$', r'\s*Kopi\s?:(?P<value>.+)$',
            r'\s*Dw\s?:(?P<value>.+)$', r'\s*Копия\s?:(?P<value>.+)$', r'\s*Kópia\s?:(?P<value>.+)$',
            r'\s*Kopia\s?:(?P<value>.+)$', r'\s*Копія\s?:(?P<value>.+)$',
        ),
    },
    'original_date': {
        'flags': 'm',
        'patterns': (
            r'^\s*Date\s?:(?P<value>.+)$', r'^\s*Datum\s?:(?P<value>.+)$', r'^\s*Dato\s?:(?P<value>.+)$',
            r'^\s*Envoyé\s?:(?P<value>.+)$', r'^\s*Fecha\s?:(?P<value>.+)$', r'^\s*Päivämäärä\s?:(?P<value>.+)$',
            r'^\s*Dátum\s?:(?P<value>.+)$', r'^\s*Data\s?:(?P<value>.+)$', r'^\s*Dată\s?:(?P<value>.+)$',
            r'^\s*Дата\s?:(?P<value>.+)$', r'^\s*Tarih\s?:(?P<value>.+)$', r'^\*?\s*Sent\s?:\*?(?P<value>.+)$',
            r'^\s*Päiväys\s?:(?P<value>.+)$', r'^\s*日付：(?P<value>.+)$',
        ),
    },
    'original_date_lax': {
        'flags': 'm',
        'patterns': (
            r'\s*Datum\s?:(?P<value>.+)$', r'\s*Sendt\s?:(?P<value>.+)$', r'\s*Gesendet\s?:(?P<value>.+)$',
            r'\s*Sent\s?:(?P<value>.+)$', r'\s*Enviado\s?:(?P<value>.+)$', r'\s*Envoyé\s?:(?P<value>.+)$',
            r'\s*Lähetetty\s?:(?P<value>.+)$', r'\s*Elküldve\s?:(?P<value>.+)$', r'\s*Inviato\s?:(?P<value>.+)$',
            r'\s*Verzonden\s?:(?P<value>.+)$', r'\s*Wysłano\s?:(?P<value>.+)$', r'\s*Trimis\s?:(?P<value>.+)$',
            r'\s*Отправлено\s?:(?P<value>.+)$', r'\s*Odoslané\s?:(?P<value>.+)$', r'\s*Skickat\s?:(?P<value>.+)$',
            r'\s*Gönderilen\s?:(?P<value>.+)$', r'\s*Відправлено\s?:(?P<value>.+)$',
        ),
    },

    # Mailboxes
    'mailbox': {
        'flags': '',
        'patterns': (
            r'^\s?\n?\s*<.+?<mailto:(?P<address>.+?)>>',
            r'^(?P<name>.+?)\s?\n?\s*<.+?<mailto:(?P<address>.+?)>>',
            r'^(?P<name>.+?)\s?\n?\s*[\[|<]mailto:(?P<address>.+?)[\]|>]',
            r"^'(?P<name>.+?)'\s?\n?\s*[\[|<](?P<address>.+?)[\]|>]",
            r'''^"'(?P<name>.+?)'"\s?\n?\s*[\[|<](?P<address>.+?)[\]|>]''',
            r'^"(?P<name>.+?)"\s?\n?\s*[\[|<](?P<address>.+?)[\]|>]',
            r'^(?P<name>[^,;]+?)\s?\n?\s*[\[|<](?P<address>.+?)[\]|>]',
            r'^(?P<name>.?)\s?\n?\s*[\[|<](?P<address>.+?)[\]|>]',
            r'^(?P<address>[^\s@]+@[^\s@]+\.[^\s@,;]+)',
            r'^(?P<name>[^;].+?)\s?\n?\s*[\[|<](?P<address>.+?)[\]|>]',
        ),
    },
    'mailbox_address': {
        'flags': '',
        'patterns': (r'^[^\s@]+@[^\s@]+\.[^\s@]+$',),
    },
}

# Categories that also get a line-capturing variant for split mode
LINE_CATEGORIES = (
    'separator', 'original_subject', 'original_subject_lax', 'original_from',
    'original_to', 'original_reply_to', 'original_cc', 'original_date',
)

MAILBOX_SEPARATORS = (',', ';')
