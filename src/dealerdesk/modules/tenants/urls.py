"""URLs a tenant is reachable at."""


def tenant_urls(slug: str, base_domain: str, path_routing: bool = True) -> dict[str, str]:
    """Build the host and path URLs for a tenant.

    Examples:
        >>> tenant_urls("acme", "app.example")
        {'subdomain': 'https://acme.app.example', 'path': 'https://app.example/acme'}
        >>> tenant_urls("acme", "app.example", path_routing=False)
        {'subdomain': 'https://acme.app.example'}
    """
    urls = {"subdomain": f"https://{slug}.{base_domain}"}
    if path_routing:
        urls["path"] = f"https://{base_domain}/{slug}"
    return urls
