from core.routing import route


with route.namespace('app.controllers').controller('dashboard').name('web').hidden():

    route.get('', 'landing').name('landing')

    with route.prefix('dashboard').name('dashboard'):

        route.get('', 'show').name('show')

        with route.prefix('users').name('users'):

            route.post('fetch', 'fetch').name('fetch')
            route.post('form', 'toggle').name('form')
            route.post('', 'add_user').name('store')

        with route.prefix('actions').name('actions'):

            route.post('process', 'process').name('process')
            route.post('report', 'report').name('report')
