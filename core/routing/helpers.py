from typing import Any
import inspect
from core.utils.micro import module, string

def controller_variants ( name: str ):

    base = name.strip().replace(".py", "")
    native = base.lower().replace('_controller', "").replace('controller', "")

    variants = set([name, name.lower(), f"{name}_controller".lower(), name.title(), name.capitalize()])
    patterns = ["{n}_controller", "{n}Controller", "{n}_Controller", "{n}controller", "{n}"]
    cases    = [base, native.lower(), native.title(), native.capitalize()]

    [variants.add(p.format(n=c)) for c in cases for p in patterns]

    return [v for v in variants if v]

def resolve_controller_class ( mod, ctr_name: str ):

    if not hasattr(mod, "__dict__"): raise ValueError("Invalid module passed")

    classes = { name: obj for name, obj in inspect.getmembers(mod, inspect.isclass) if obj.__module__ == mod.__name__ }

    for variant in controller_variants(ctr_name):
        for cls_name, cls_obj in classes.items():
            if cls_name.lower() == variant.lower():
                return cls_obj

    if classes: return list(classes.values())[0]
    raise ValueError(f"No matching controller found in module {mod.__name__}")

def resolve_controller_name ( namespace: str, controller: str ):

    if not controller: return ''

    controller = controller.strip().replace("\\", "/").replace("//", "/").replace(".", "/").strip("/")
    segments   = controller.split("/")
    ctr_name   = segments[-1]
    subpath    = ".".join(segments[:-1]) if len(segments) > 1 else ""
    namespace  = namespace.strip('.') or module.find('controllers', True)
    namespace  = namespace + (f".{subpath}" if subpath else "")

    for name in sorted(controller_variants(ctr_name), key=len, reverse=True):
        if module.exists(f"{namespace}.{name}"): return string.join(subpath, name, separator='/')

    raise ImportError(f"Controller not found: {namespace} -> {controller}")

def resolve_handler ( handler: Any, namespace: str, controller: str ):

    if callable(handler): return handler
    ctrl_name, method = None, None

    if isinstance(handler, (list, tuple)) and len(handler) == 2: ctrl_name, method = handler
    elif isinstance(handler, str) and "@" in handler: ctrl_name, method = handler.split("@", 1)
    elif isinstance(handler, str) and controller: ctrl_name, method = controller, handler
    else: raise ValueError(f"Invalid handler format: {handler}")

    ctrl_path = str(ctrl_name).replace("-", "_").replace("\\", "/").strip("/")
    segments  = ctrl_path.split("/")
    ctrl_file = string.snake(segments[-1])
    subpath   = ".".join(map(string.snake, segments[:-1])) if len(segments) > 1 else ""
    namespace = f"{namespace}.{subpath}" if subpath else namespace

    mod = module.require(f"{namespace}.{ctrl_file}", True)

    if not mod: mod = module.require(f"{namespace}.{resolve_controller_name(namespace, ctrl_file)}", True)
    if not mod: raise ImportError(f"Handler module not found: {namespace} -> {handler}")

    klass = resolve_controller_class(mod, ctrl_file)
    instance = klass()

    if hasattr(instance, method): return getattr(instance, method)
    raise AttributeError(f"Method '{method}' not found in controller '{klass.__name__}'")
