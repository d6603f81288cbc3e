"""
Default content for the settings singletons.

Rows are created from these values the first time a singleton is read, and
missing optional blocks (the contact cards) are backfilled from here.
Nested JSON keeps the shape the site front end renders.
"""

CONTACT_CARD = {
    "title": "Entre em contato",
    "description": "Escolha a forma mais conveniente para você",
    "icon": "Mail",
    "iconColor": "#6366f1",
    "backgroundColor": "#ffffff",
}

INFO_CARD = {
    "title": "Horários & Localização",
    "description": "Informações práticas para seu atendimento",
    "icon": "Clock",
    "iconColor": "#10b981",
    "backgroundColor": "#ffffff",
}

CONTACT_SETTINGS = {
    "contact_items": [
        {
            "id": 1,
            "type": "whatsapp",
            "title": "WhatsApp",
            "description": "(00) 00000-0000",
            "icon": "FaWhatsapp",
            "color": "#25D366",
            "link": "https://wa.me/",
            "isActive": True,
            "order": 0,
        },
        {
            "id": 2,
            "type": "instagram",
            "title": "Instagram",
            "description": "@consultorio",
            "icon": "FaInstagram",
            "color": "#E4405F",
            "link": "https://instagram.com/",
            "isActive": True,
            "order": 1,
        },
        {
            "id": 3,
            "type": "email",
            "title": "Email",
            "description": "contato@example.com",
            "icon": "Mail",
            "color": "#EA4335",
            "link": "mailto:contato@example.com",
            "isActive": True,
            "order": 2,
        },
    ],
    "schedule_info": {
        "weekdays": "Segunda à Sexta: 8h às 18h",
        "saturday": "Sábado: 8h às 12h",
        "sunday": "Domingo: Fechado",
        "additional_info": "Horários flexíveis disponíveis",
        "isActive": True,
    },
    "location_info": {
        "city": "",
        "maps_link": "",
        "isActive": True,
    },
    "contact_card": CONTACT_CARD,
    "info_card": INFO_CARD,
}

FOOTER_SETTINGS = {
    "general_info": {
        "description": "Cuidando da sua saúde mental com carinho e dedicação",
        "showCnpj": False,
        "cnpj": "",
    },
    "contact_buttons": [
        {
            "id": 1,
            "type": "whatsapp",
            "title": "WhatsApp",
            "label": "WhatsApp",
            "icon": "FaWhatsapp",
            "color": "#25d366",
            "gradient": "from-green-400 to-green-500",
            "link": "https://wa.me/",
            "isActive": True,
            "order": 0,
        },
        {
            "id": 2,
            "type": "instagram",
            "title": "Instagram",
            "label": "Instagram",
            "icon": "FaInstagram",
            "color": "#e4405f",
            "gradient": "from-purple-400 to-pink-500",
            "link": "https://instagram.com/",
            "isActive": True,
            "order": 1,
        },
    ],
    "certification_items": [
        {
            "id": 1,
            "title": "Atendimento",
            "items": ["Presencial e Online", "Segunda à Sábado"],
            "additionalInfo": "Atendimento particular<br/>Horários flexíveis",
            "isActive": True,
            "order": 0,
        },
        {
            "id": 2,
            "title": "Certificações",
            "items": ["Registrada no Conselho", "Federal de Psicologia", "Sigilo e ética profissional"],
            "additionalInfo": "",
            "isActive": True,
            "order": 1,
        },
    ],
    "trust_seals": [
        {
            "id": 1,
            "label": "CFP",
            "icon": "shield",
            "color": "#3b82f6",
            "gradientFrom": "#3b82f6",
            "gradientTo": "#1d4ed8",
            "useGradient": True,
            "textColor": "#ffffff",
            "description": "Conselho Federal de Psicologia",
            "isActive": True,
            "order": 0,
        },
        {
            "id": 2,
            "label": "🔒",
            "icon": "lock",
            "color": "#10b981",
            "gradientFrom": "#10b981",
            "gradientTo": "#059669",
            "useGradient": True,
            "textColor": "#ffffff",
            "description": "Segurança e privacidade",
            "isActive": True,
            "order": 1,
        },
    ],
    "bottom_info": {
        "copyright": "© 2024 Todos os direitos reservados",
        "certificationText": "Conteúdo informativo. Não substitui atendimento profissional.",
        "madeWith": "Feito com ♥ e muito café",
    },
}

COOKIE_SETTINGS = {
    "is_enabled": True,
    "title": "Cookies & Privacidade",
    "message": (
        "Utilizamos cookies para melhorar sua experiência no site e personalizar "
        "conteúdo. Ao continuar navegando, você concorda com nossa política de privacidade."
    ),
    "accept_button_text": "Aceitar Cookies",
    "decline_button_text": "Não Aceitar",
    "privacy_link_text": "Política de Privacidade",
    "terms_link_text": "Termos de Uso",
    "position": "bottom",
}

PRIVACY_POLICY = {
    "title": "Política de Privacidade",
    "content": (
        "<h2>1. Informações que Coletamos</h2>"
        "<p>Coletamos apenas as informações que você nos fornece ao entrar em contato.</p>"
        "<h2>2. Uso das Informações</h2>"
        "<p>As informações são usadas exclusivamente para responder ao seu contato "
        "e agendar atendimentos.</p>"
        "<h2>3. Sigilo</h2>"
        "<p>Todo o atendimento segue o Código de Ética Profissional do Psicólogo.</p>"
    ),
    "is_active": True,
}

TERMS_OF_USE = {
    "title": "Termos de Uso",
    "content": (
        "<h2>1. Aceitação dos Termos</h2>"
        "<p>Ao utilizar este site você concorda com estes termos.</p>"
        "<h2>2. Conteúdo</h2>"
        "<p>O conteúdo do site é informativo e não substitui atendimento psicológico.</p>"
    ),
    "is_active": True,
}

SINGLETON_DEFAULTS = {
    "contact_settings": CONTACT_SETTINGS,
    "footer_settings": FOOTER_SETTINGS,
    "cookie_settings": COOKIE_SETTINGS,
    "privacy_policy": PRIVACY_POLICY,
    "terms_of_use": TERMS_OF_USE,
}
