from fastapi import Request
from fastapi.responses import HTMLResponse, RedirectResponse
from app.services import DASHBOARD_PATH

class DashboardController:

    def dashboard ( self, request: Request ):

        return request.app.state.dashboard

    def back ( self ):

        return RedirectResponse(url=DASHBOARD_PATH, status_code=303)

    async def landing ( self, request: Request ):

        return request.app.state.templates.TemplateResponse(request, 'landing.html', {'target': DASHBOARD_PATH})

    async def show ( self, request: Request ):

        views = request.app.state.views
        template = request.app.state.templates.get_template('dashboard.html')

        html = views.remember(DASHBOARD_PATH, lambda: template.render(**self.dashboard(request).context()))
        return HTMLResponse(html)

    async def fetch ( self, request: Request ):

        await self.dashboard(request).fetch_users()
        return self.back()

    async def toggle ( self, request: Request ):

        self.dashboard(request).toggle_add_form()
        return self.back()

    async def add_user ( self, request: Request ):

        form = await request.form()

        await self.dashboard(request).add_user(form.get('userName'), form.get('userEmail'))
        return self.back()

    async def process ( self, request: Request ):

        form = await request.form()

        await self.dashboard(request).submit_form(form.get('title'), form.get('description'), form.get('priority'))
        return self.back()

    async def report ( self, request: Request ):

        await self.dashboard(request).generate_report()
        return self.back()
