"""Built-in landing page served by the API."""

from __future__ import annotations

from pagedraft.render.template import PageTemplate, Region

# "title" and "explanation-2" repeat on purpose; an edit to one id applies to
# every region carrying it
LANDING_PAGE = PageTemplate(
    title="Microservices with Spring Boot and Spring Cloud",
    regions=[
        Region("title", "Master Microservices with Spring Boot and Spring Cloud", tag="h1"),
        Region("feature-1-emoji", "\N{RABBIT}"),
        Region("feature-1-text", "RabbitMQ", tag="h4"),
        Region("feature-2-emoji", "\N{SHIP}"),
        Region("feature-2-text", "Docker", tag="h4"),
        Region("feature-3-emoji", "\N{ATOM SYMBOL}\N{VARIATION SELECTOR-16}"),
        Region("feature-3-text", "Kubernetes", tag="h4"),
        Region("feature-4-emoji", "\N{CREDIT CARD}"),
        Region("feature-4-text", "M-Pesa & Stripe", tag="h4"),
        Region(
            "title-2",
            "Microservice architectures make applications easier to scale "
            "and faster to develop, enabling innovation and shortening the "
            "time to market for new features.",
            tag="h2",
        ),
        Region("title", "Topics", tag="h2"),
        Region(
            "explanation-2",
            "Spring Boot Microservices\n"
            "Spring Data JPA\n"
            "Spring Security\n"
            "Message Queue with RabbitMQ\n"
            "Spring Cloud (Service Discovery, Distributed Tracing, OpenFeign)\n"
            "Docker\n"
            "Kubernetes\n"
            "Payment: M-Pesa, Stripe\n"
            "PostgreSQL",
        ),
        Region(
            "explanation-3",
            "In this course you will build microservices from scratch with Spring "
            "Cloud, which gives developers tools to quickly build common patterns "
            "in distributed systems such as configuration management, service "
            "discovery, circuit breakers, intelligent routing and distributed sessions.",
        ),
        Region(
            "explanation-4",
            "You will also learn Docker and Kubernetes, so you can containerize "
            "your microservices and run them on the most popular open source "
            "container orchestration engine.",
        ),
        Region("explanation-1-inspect", "Five days", tag="span"),
        Region("explanation-1-pre-curl", "1 October 2022 - 21 October 2022", tag="pre"),
        Region("explanation-2", "Limited places. Register now."),
        Region("explanation-2", "Price: 3,000.00 MT"),
        Region("explanation-2", "WhatsApp group"),
    ],
)
