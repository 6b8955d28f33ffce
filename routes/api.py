from core.routing import route


with route.namespace('app.controllers').name('api'):

    with route.controller('user').prefix('api/users').name('users').tag('users'):

        route.get('', 'index').name('index')
        route.post('', 'store').name('store')
