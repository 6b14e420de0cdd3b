from fastapi import APIRouter

from genv_ex.models.template_model import RenderResult

from .controller import RenderRequest, TemplateController, VariablesRequest, VariablesResponse

router = APIRouter()
controller = TemplateController()


@router.post("/render", response_model=RenderResult)
def render_template(payload: RenderRequest):
    return controller.render(payload)


@router.post("/variables", response_model=VariablesResponse)
def list_variables(payload: VariablesRequest):
    return controller.variables(payload)
