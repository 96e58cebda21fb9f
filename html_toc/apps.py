from django.apps import AppConfig


class HtmlTocConfig(AppConfig):
    name = 'html_toc'
    verbose_name = 'HTML table of contents'
