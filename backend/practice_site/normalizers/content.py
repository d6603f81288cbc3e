from .common import normalize_ordered


def normalize_testimonial(testimonial, admin=False):
    return {
        **normalize_ordered(testimonial, admin),
        "name": testimonial.name,
        "service": testimonial.service,
        "testimonial": testimonial.testimonial,
        "rating": testimonial.rating,
        "photo": testimonial.photo,
    }


def normalize_faq_item(item, admin=False):
    return {
        **normalize_ordered(item, admin),
        "question": item.question,
        "answer": item.answer,
    }


def normalize_service(service, admin=False):
    return {
        **normalize_ordered(service, admin),
        "title": service.title,
        "description": service.description,
        "icon": service.icon,
        "gradient": service.gradient,
        "price": service.price,
        "duration": service.duration,
        "show_price": service.show_price,
        "show_duration": service.show_duration,
    }


def normalize_carousel_item(item, admin=False):
    return {
        **normalize_ordered(item, admin),
        "title": item.title,
        "description": item.description,
        "image_url": item.image_url,
        "show_text": item.show_text,
    }


def normalize_specialty(specialty, admin=False):
    return {
        **normalize_ordered(specialty, admin),
        "title": specialty.title,
        "description": specialty.description,
        "icon": specialty.icon,
        "icon_color": specialty.icon_color,
    }


def normalize_custom_code(code, admin=False):
    return {
        **normalize_ordered(code, admin),
        "name": code.name,
        "code": code.code,
        "location": code.location,
    }
