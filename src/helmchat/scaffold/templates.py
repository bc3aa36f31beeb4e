#!/usr/bin/env python3
"""
HELMCHAT CHART TEMPLATES
------------------------
Fixed Go-template sources for the files under ``templates/``. Only the
chart name is substituted; everything else is rendered by helm itself.

Author: HelmChat Team
Date: 2026-10-19
"""

from string import Template

# string.Template with ${chart_name}: Go's own "$name" variables are left
# untouched by safe_substitute.
HELPERS_TPL = Template('''{{/*
Expand the name of the chart.
*/}}
{{- define "${chart_name}.name" -}}
{{- default .Chart.Name .Values.nameOverride | trunc 63 | trimSuffix "-" }}
{{- end }}

{{/*
Create a default fully qualified app name.
*/}}
{{- define "${chart_name}.fullname" -}}
{{- if .Values.fullnameOverride }}
{{- .Values.fullnameOverride | trunc 63 | trimSuffix "-" }}
{{- else }}
{{- $name := default .Chart.Name .Values.nameOverride }}
{{- printf "%s-%s" .Release.Name $name | trunc 63 | trimSuffix "-" }}
{{- end }}
{{- end }}

{{/*
Create chart name and version as used by the chart label.
*/}}
{{- define "${chart_name}.chart" -}}
{{- printf "%s-%s" .Chart.Name .Chart.Version | replace "+" "_" | trunc 63 | trimSuffix "-" }}
{{- end }}

{{/*
Common labels
*/}}
{{- define "${chart_name}.labels" -}}
helm.sh/chart: {{ include "${chart_name}.chart" . }}
{{ include "${chart_name}.selectorLabels" . }}
app.kubernetes.io/version: {{ .Chart.AppVersion | quote }}
app.kubernetes.io/managed-by: {{ .Release.Service }}
{{- end }}

{{/*
Selector labels
*/}}
{{- define "${chart_name}.selectorLabels" -}}
app.kubernetes.io/name: {{ include "${chart_name}.name" . }}
app.kubernetes.io/instance: {{ .Release.Name }}
{{- end }}
''')

DEPLOYMENT_YAML = Template('''apiVersion: apps/v1
kind: Deployment
metadata:
  name: {{ include "${chart_name}.fullname" . }}
  labels:
    {{- include "${chart_name}.labels" . | nindent 4 }}
spec:
  replicas: {{ .Values.replicaCount }}
  selector:
    matchLabels:
      {{- include "${chart_name}.selectorLabels" . | nindent 6 }}
  template:
    metadata:
      labels:
        {{- include "${chart_name}.selectorLabels" . | nindent 8 }}
    spec:
      containers:
        - name: {{ .Chart.Name }}
          image: "{{ .Values.image.repository }}:{{ .Values.image.tag | default .Chart.AppVersion }}"
          imagePullPolicy: {{ .Values.image.pullPolicy }}
          ports:
            - name: http
              containerPort: {{ .Values.service.port }}
              protocol: TCP
          resources:
            {{- toYaml .Values.resources | nindent 12 }}
''')

SERVICE_YAML = Template('''apiVersion: v1
kind: Service
metadata:
  name: {{ include "${chart_name}.fullname" . }}
  labels:
    {{- include "${chart_name}.labels" . | nindent 4 }}
spec:
  type: {{ .Values.service.type }}
  ports:
    - port: {{ .Values.service.port }}
      targetPort: http
      protocol: TCP
      name: http
  selector:
    {{- include "${chart_name}.selectorLabels" . | nindent 4 }}
''')

TEMPLATE_FILES = {
    "templates/_helpers.tpl": HELPERS_TPL,
    "templates/deployment.yaml": DEPLOYMENT_YAML,
    "templates/service.yaml": SERVICE_YAML,
}


def render_templates(chart_name: str) -> dict:
    """Returns {relative path: content} for every file under templates/."""
    return {
        path: template.safe_substitute(chart_name=chart_name)
        for path, template in TEMPLATE_FILES.items()
    }
