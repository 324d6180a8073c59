from .greeter import GREETING, CONTENT_TYPE, GreeterResource, make_site
