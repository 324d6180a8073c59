import logging
logger = logging.getLogger('greeter')

from twisted.web import resource, server

# The body names port 3000 whatever port we are actually bound to.
GREETING = b"<h1>Hello from Node on port 3000</h1>"
CONTENT_TYPE = b"text/html"


class GreeterResource(resource.Resource):
    '''
    Answers every request, whatever its method, path, headers or body,
    with the same 200 response.
    '''

    isLeaf = True

    def render(self, request):
        logger.debug('%s %s; greeting',
                     request.method.decode('ascii', 'replace'),
                     request.uri.decode('ascii', 'replace'))
        request.setResponseCode(200)
        request.setHeader(b'content-type', CONTENT_TYPE)
        return GREETING


def make_site():
    return server.Site(GreeterResource())
