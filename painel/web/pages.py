# painel/web/pages.py
# Templates Jinja das telas. O layout recebe o corpo já renderizado em `body`.

LAYOUT = """<!doctype html>
<html lang="pt-BR">
<head>
<meta charset="utf-8">
<title>{{ title }} · Painel</title>
<style>
  body { font-family: Arial, sans-serif; margin: 0; background: #fafafa; color: #111; }
  .topbar { background: #fff; border-bottom: 1px solid #eee; padding: 14px 18px; }
  .topbar a { margin-right: 14px; color: #111; font-weight: 700; text-decoration: none; }
  .wrap { max-width: 1100px; margin: 0 auto; padding: 18px; }
  .card { background: #fff; border: 1px solid #eee; border-radius: 16px; padding: 18px; margin-top: 14px; }
  .row { display: flex; gap: 10px; align-items: center; justify-content: space-between; }
  .kpi { display: grid; grid-template-columns: 1fr 1fr 1fr; gap: 12px; }
  .kpi .label { font-size: 13px; color: #666; }
  .kpi .value { font-size: 24px; font-weight: 800; }
  .muted { color: #777; font-size: 12px; }
  .btn { padding: 8px 12px; border-radius: 10px; border: 1px solid #ddd; background: #fff; cursor: pointer; font-weight: 700; }
  .btnPrimary { background: #111; color: #fff; border-color: #111; }
  .btnDanger { color: #b00020; }
  label { font-weight: 700; display: block; margin-top: 10px; margin-bottom: 6px; }
  input, textarea { width: 100%; padding: 10px; border: 1px solid #ddd; border-radius: 10px; box-sizing: border-box; }
  textarea { min-height: 140px; }
  table { width: 100%; border-collapse: collapse; }
  th, td { border-bottom: 1px solid #eee; padding: 10px 8px; text-align: left; font-size: 13px; }
  .toast { padding: 12px; border-radius: 12px; margin-top: 10px; border: 1px solid #bfe6c8; background: #f3fff6; }
  .toast.destructive { border-color: #f3b6b6; background: #fff3f3; }
  .toast.warning { border-color: #f3dfa6; background: #fffbea; }
  .preview { background: #e7ffdb; border-radius: 12px; padding: 12px; white-space: pre-wrap; }
  .inline { display: inline; }
</style>
</head>
<body>
<div class="topbar">
  <a href="{{ url_for('relatorios_page') }}">Relatórios</a>
  <a href="{{ url_for('configuracoes_page') }}">Configurações</a>
  <a href="{{ url_for('usuarios_page') }}">Usuários</a>
</div>
<div class="wrap">
  {% for variant, toast in get_flashed_messages(with_categories=true) %}
    <div class="toast {{ variant }}"><strong>{{ toast.title }}</strong> {{ toast.description }}</div>
  {% endfor %}
  {{ body|safe }}
</div>
</body>
</html>
"""

RELATORIOS = """
<h1>Relatórios Financeiros</h1>
<div class="kpi">
  <div class="card">
    <div class="label">Total a Receber</div>
    <div class="value">{{ brl(kpis.total_receivable) }}</div>
    <p class="muted">Valor de todos lançamentos pendentes.</p>
  </div>
  <div class="card">
    <div class="label">Recebido (Últimos 30 dias)</div>
    <div class="value">{{ brl(kpis.received_last_30_days) }}</div>
    <p class="muted">Soma dos valores pagos recentemente.</p>
  </div>
  <div class="card">
    <div class="label">Lançamentos Atrasados</div>
    <div class="value">{{ kpis.overdue_count }}</div>
    <p class="muted">Lançamentos pendentes com data vencida.</p>
  </div>
</div>
<div class="card">
  <h2>Receita Mensal</h2>
  <p class="muted">Receitas pagas agrupadas por mês.</p>
  <img src="{{ chart_uri }}" alt="Receita Mensal" style="width: 100%;">
  <table>
    <tr>{% for mes in kpis.monthly_revenue %}<th>{{ mes.label }}</th>{% endfor %}</tr>
    <tr>{% for mes in kpis.monthly_revenue %}<td>{{ brl(mes.total) }}</td>{% endfor %}</tr>
  </table>
</div>
"""

CONFIGURACOES = """
<h1>Configurações</h1>
<div class="card row">
  <div>
    <h2>Segurança</h2>
    <p class="muted">Gerencie sua senha de acesso.</p>
  </div>
  <a class="btn" href="{{ url_for('alterar_senha') }}">Alterar Senha</a>
</div>
<div class="card">
  <div class="row">
    <div>
      <h2>Modelos WhatsApp</h2>
      <p class="muted">Clique para editar, duplicar ou remover.</p>
    </div>
    <a class="btn btnPrimary" href="{{ url_for('novo_modelo') }}">Criar Modelo</a>
  </div>
  {% for template in templates %}
    <div class="card row">
      <div>
        <a href="{{ url_for('editar_modelo', template_id=template.id) }}"><strong>{{ template.title }}</strong></a>
        {% if template.is_default %}<span class="muted">(padrão)</span>{% endif %}
        <p class="muted">{{ template.content }}</p>
      </div>
      <div>
        <form class="inline" method="post" action="{{ url_for('duplicar_modelo', template_id=template.id) }}">
          <button class="btn" type="submit">Duplicar</button>
        </form>
        <form class="inline" method="post" action="{{ url_for('remover_modelo', template_id=template.id) }}">
          <button class="btn btnDanger" type="submit">Apagar</button>
        </form>
      </div>
    </div>
  {% else %}
    <p class="muted">Nenhum modelo cadastrado.</p>
  {% endfor %}
</div>
"""

MODELO_FORM = """
<h1>{{ "Editar Modelo" if state.selected_template else "Criar Modelo" }}</h1>
<div class="card">
  <form method="post">
    <label for="title">Título</label>
    <input id="title" name="title" value="{{ state.title }}">
    <label for="content">Mensagem</label>
    <textarea id="content" name="content">{{ state.content }}</textarea>
    <p class="muted">Variáveis:</p>
    {% for v in variables %}
      <button class="btn" type="submit" name="variavel" value="{{ v }}">{{ v }}</button>
    {% endfor %}
    <p>
      <button class="btn" type="button" onclick="navigator.clipboard.writeText(document.getElementById('content').value).then(function () { document.getElementById('copiado').hidden = false; })">Copiar Mensagem</button>
      <button class="btn btnPrimary" type="submit" name="salvar" value="1">Salvar Modelo</button>
    </p>
  </form>
  <div id="copiado" class="toast" hidden><strong>Copiado!</strong> Mensagem copiada para a área de transferência.</div>
  <h3>Pré-visualização</h3>
  <div class="preview">{{ preview }}</div>
</div>
"""

SENHA_FORM = """
<h1>Alterar Senha</h1>
<div class="card">
  <form method="post">
    <label for="new_password">Nova senha</label>
    <input id="new_password" name="new_password" type="password">
    <label for="confirm_password">Confirmar nova senha</label>
    <input id="confirm_password" name="confirm_password" type="password">
    <p><button class="btn btnPrimary" type="submit">Salvar Senha</button></p>
  </form>
</div>
"""

USUARIOS = """
<h1>Usuários do Sistema</h1>
<div class="card">
  {% if users %}
    <table>
      <tr><th>Nome</th><th>Email</th><th>Criado em</th></tr>
      {% for user in users %}
        <tr><td>{{ user.full_name or "—" }}</td><td>{{ user.email }}</td><td>{{ (user.created_at or "")[:10] }}</td></tr>
      {% endfor %}
    </table>
  {% else %}
    <p class="muted">Nenhum usuário encontrado.</p>
  {% endif %}
</div>
<div class="card">
  <h2>Cadastrar Novo Usuário</h2>
  <p class="toast destructive">IMPORTANTE: Esta função requer uma Edge Function/API de backend para ser segura e funcional.</p>
  <form method="post">
    <label for="new_full_name">Nome Completo</label>
    <input id="new_full_name" name="new_full_name" required>
    <label for="new_email">Email</label>
    <input id="new_email" name="new_email" type="email" required>
    <label for="new_password">Senha</label>
    <input id="new_password" name="new_password" type="password" required>
    <p><button class="btn btnPrimary" type="submit">Cadastrar Usuário</button></p>
  </form>
</div>
"""
